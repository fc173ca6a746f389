PHISHING_EMAILS = [
    {
        "id": "1",
        "subject": "Account Security Alert",
        "from": "security@bank-secure-alert.com",
        "content": "Dear customer, your account has been locked. Click here to verify your identity.",
        "is_phishing": True,
    },
    {
        "id": "2",
        "subject": "Your Amazon Order",
        "from": "orders@amazon.com",
        "content": "Your order #123456 has been shipped. Track your package here.",
        "is_phishing": False,
    },
    {
        "id": "3",
        "subject": "Urgent: Password Reset Required",
        "from": "microsoft.support@hotmail.com",
        "content": "Your Microsoft account requires immediate attention. Reset your password now.",
        "is_phishing": True,
    },
    {
        "id": "4",
        "subject": "Netflix Subscription Update",
        "from": "netflix@emails.com",
        "content": "Your payment method has expired. Update your billing information now to continue streaming.",
        "is_phishing": True,
    },
    {
        "id": "5",
        "subject": "Team Meeting Schedule",
        "from": "hr@company.com",
        "content": "The weekly team meeting has been rescheduled to 3 PM tomorrow.",
        "is_phishing": False,
    },
]

SUSPICIOUS_FILES = [
    {"id": "1", "name": "invoice_2024.pdf.exe", "source": "Email attachment", "size": "412 KB", "is_malicious": True},
    {"id": "2", "name": "quarterly_report.xlsx", "source": "Shared drive", "size": "88 KB", "is_malicious": False},
    {"id": "3", "name": "free_vpn_crack.zip", "source": "Torrent download", "size": "3.1 MB", "is_malicious": True},
    {"id": "4", "name": "team_photo.jpg", "source": "Company chat", "size": "1.2 MB", "is_malicious": False},
    {"id": "5", "name": "update_flash_player.msi", "source": "Pop-up ad", "size": "920 KB", "is_malicious": True},
    {"id": "6", "name": "enable_macros_to_view.docm", "source": "Unknown sender", "size": "64 KB", "is_malicious": True},
]

MORSE_MESSAGE = "HOW ARE YOU"

SOCIAL_ENGINEERING_SCENARIOS = [
    {
        "id": "1",
        "question": "A caller claims to be from IT support and needs your login credentials to fix a system issue. Should you share this information?",
        "should_share": False,
        "explanation": "Never share login credentials, even with IT support. They should have their own admin access if needed.",
    },
    {
        "id": "2",
        "question": "Someone from HR sends an email asking for your employee ID to process a bonus. The email is from your company domain. Should you provide it?",
        "should_share": True,
        "explanation": "Employee ID is generally safe to share with verified internal HR staff using official channels.",
    },
    {
        "id": "3",
        "question": "A social media quiz asks for your mother's maiden name to generate your 'fantasy name'. Should you participate?",
        "should_share": False,
        "explanation": "Mother's maiden name is commonly used as a security question. Avoid sharing such information.",
    },
    {
        "id": "4",
        "question": "A colleague asks for your current project's name and general timeline. Should you share this information?",
        "should_share": True,
        "explanation": "General project information is usually safe to share with colleagues unless explicitly classified.",
    },
    {
        "id": "5",
        "question": "A phone caller offers to help you claim a prize but needs your bank account details. Should you provide them?",
        "should_share": False,
        "explanation": "Never share banking information with unsolicited callers, regardless of the offer.",
    },
]

TRAFFIC_RULES = [
    {"id": "1", "type": "Web Traffic", "source": "203.0.113.42", "port": 443, "protocol": "HTTPS", "risk": "low", "should_block": False},
    {"id": "2", "type": "Email", "source": "198.51.100.77", "port": 25, "protocol": "SMTP", "risk": "medium", "should_block": True},
    {"id": "3", "type": "File Download", "source": "192.0.2.15", "port": 21, "protocol": "FTP", "risk": "high", "should_block": True},
    {"id": "4", "type": "Web Traffic", "source": "203.0.113.54", "port": 80, "protocol": "HTTP", "risk": "medium", "should_block": True},
    {"id": "5", "type": "API Request", "source": "203.0.113.128", "port": 443, "protocol": "HTTPS", "risk": "low", "should_block": False},
]

CIPHER_MESSAGES = [
    {"id": "1", "plain": "Transfer $500 to Account 12345", "key": 3},
    {"id": "2", "plain": "Meeting at 3 PM tomorrow", "key": 5},
    {"id": "3", "plain": "Password is SecurePass123", "key": 2},
]

PRIVACY_ITEMS = [
    {"id": "1", "type": "Phone Number", "content": "+1 (555) 123-4567", "category": "personal", "should_be_private": True},
    {"id": "2", "type": "Home Address", "content": "123 Main St, Anytown, USA", "category": "location", "should_be_private": True},
    {"id": "3", "type": "Vacation Plans", "content": "Going to Hawaii next week! House will be empty!", "category": "plans", "should_be_private": True},
    {"id": "4", "type": "Work Info", "content": "Software Engineer at Tech Corp", "category": "personal", "should_be_private": False},
    {"id": "5", "type": "Bank Details", "content": "Account #1234 at City Bank", "category": "financial", "should_be_private": True},
    {"id": "6", "type": "Education", "content": "Graduated from State University", "category": "personal", "should_be_private": False},
    {"id": "7", "type": "Birthday Plans", "content": "Party at Joe's Bar this Saturday!", "category": "plans", "should_be_private": False},
    {"id": "8", "type": "Credit Card", "content": "Just got my new Visa card!", "category": "financial", "should_be_private": True},
]

RANSOMWARE_STEPS = [
    {
        "id": "1",
        "title": "Initial Response",
        "description": "Your computer screen shows a message demanding Bitcoin payment to unlock your files. What's your first action?",
        "options": [
            {"id": "1a", "text": "Pay the ransom immediately", "correct": False},
            {"id": "1b", "text": "Disconnect from the network", "correct": True},
            {"id": "1c", "text": "Try to unlock files manually", "correct": False},
            {"id": "1d", "text": "Continue working on other tasks", "correct": False},
        ],
    },
    {
        "id": "2",
        "title": "System Analysis",
        "description": "You need to understand the scope of the infection. What should you check first?",
        "options": [
            {"id": "2a", "text": "Browse the internet for solutions", "correct": False},
            {"id": "2b", "text": "Run a system scan", "correct": False},
            {"id": "2c", "text": "Check which files are encrypted", "correct": True},
            {"id": "2d", "text": "Delete suspicious files", "correct": False},
        ],
    },
    {
        "id": "3",
        "title": "Data Recovery",
        "description": "How do you recover your files?",
        "options": [
            {"id": "3a", "text": "Restore from offline backup", "correct": True},
            {"id": "3b", "text": "Use online recovery tools", "correct": False},
            {"id": "3c", "text": "Negotiate with attackers", "correct": False},
            {"id": "3d", "text": "Format the system", "correct": False},
        ],
    },
    {
        "id": "4",
        "title": "Prevention",
        "description": "What step should you take to prevent future attacks?",
        "options": [
            {"id": "4a", "text": "Install more antivirus programs", "correct": False},
            {"id": "4b", "text": "Never open any email attachments", "correct": False},
            {"id": "4c", "text": "Set up regular offline backups", "correct": True},
            {"id": "4d", "text": "Disable all network connections", "correct": False},
        ],
    },
]

INCIDENT_STEPS = [
    {
        "id": "1",
        "title": "Identification",
        "description": "A user reports that sensitive customer data has been accessed by an unauthorized party. What's your first step?",
        "options": [
            {"id": "1a", "text": "Immediately shut down all systems", "correct": False},
            {"id": "1b", "text": "Document the initial report and gather evidence", "correct": True},
            {"id": "1c", "text": "Call the police", "correct": False},
            {"id": "1d", "text": "Email all customers about the breach", "correct": False},
        ],
    },
    {
        "id": "2",
        "title": "Containment",
        "description": "You've confirmed a data breach. What's your immediate containment strategy?",
        "options": [
            {"id": "2a", "text": "Delete all affected files", "correct": False},
            {"id": "2b", "text": "Isolate affected systems and change all passwords", "correct": True},
            {"id": "2c", "text": "Install new antivirus software", "correct": False},
            {"id": "2d", "text": "Continue normal operations while investigating", "correct": False},
        ],
    },
    {
        "id": "3",
        "title": "Eradication",
        "description": "How do you ensure the threat is eliminated?",
        "options": [
            {"id": "3a", "text": "Only remove malware from affected systems", "correct": False},
            {"id": "3b", "text": "Restore from backup without checking for vulnerabilities", "correct": False},
            {"id": "3c", "text": "Comprehensive security audit and patch all vulnerabilities", "correct": True},
            {"id": "3d", "text": "Replace all computers", "correct": False},
        ],
    },
    {
        "id": "4",
        "title": "Recovery",
        "description": "What's the best approach to restore operations?",
        "options": [
            {"id": "4a", "text": "Immediately restore all systems to full operation", "correct": False},
            {"id": "4b", "text": "Gradually restore with monitoring and testing", "correct": True},
            {"id": "4c", "text": "Only restore critical systems", "correct": False},
            {"id": "4d", "text": "Start fresh with new systems", "correct": False},
        ],
    },
    {
        "id": "5",
        "title": "Lessons Learned",
        "description": "How do you prevent future incidents?",
        "options": [
            {"id": "5a", "text": "Only focus on technical improvements", "correct": False},
            {"id": "5b", "text": "Fire the responsible employees", "correct": False},
            {"id": "5c", "text": "Document incident and update security policies", "correct": True},
            {"id": "5d", "text": "Invest in new security products only", "correct": False},
        ],
    },
]

# One entry per level, in play order. "scoring" is read by definitions.build_level.
LEVEL_TABLE = [
    {
        "id": 1,
        "slug": "password-master",
        "name": "Password Master",
        "description": "Master the art of secure password creation.",
        "kind": "sequential",
        "scoring": {"policy": "attempt_penalty", "base": 10, "penalty": 1, "floor": 1},
    },
    {
        "id": 2,
        "slug": "phishing-detective",
        "name": "Phishing Detective",
        "description": "Learn to identify and avoid suspicious emails.",
        "kind": "quiz",
        "scoring": {"policy": "correct_count"},
    },
    {
        "id": 3,
        "slug": "malware-hunter",
        "name": "Malware Hunter",
        "description": "Quarantine the files that carry malware and leave the rest alone.",
        "kind": "batch",
        "scoring": {"policy": "item_mistakes", "base": 10},
    },
    {
        "id": 4,
        "slug": "morse-code-master",
        "name": "Morse Code Master",
        "description": "Translate a message into dots and dashes.",
        "kind": "sequential",
        "scoring": {"policy": "attempt_penalty", "base": 10, "penalty": 1, "floor": 1},
    },
    {
        "id": 5,
        "slug": "social-engineering",
        "name": "Social Engineering",
        "description": "Decide what is safe to share and what is a manipulation attempt.",
        "kind": "quiz",
        "scoring": {"policy": "correct_count"},
    },
    {
        "id": 6,
        "slug": "firewall-fortress",
        "name": "Firewall Fortress",
        "description": "Block the risky traffic without cutting off legitimate services.",
        "kind": "batch",
        "scoring": {"policy": "item_mistakes", "base": 10},
    },
    {
        "id": 7,
        "slug": "data-encryption",
        "name": "Data Encryption",
        "description": "Decrypt Caesar-cipher messages. Each wrong attempt costs 2 points.",
        "kind": "sequential",
        "scoring": {"policy": "attempt_penalty", "base": 10, "penalty": 2, "floor": 0},
    },
    {
        "id": 8,
        "slug": "social-media-sleuth",
        "name": "Social Media Sleuth",
        "description": "Pick which profile details should be private.",
        "kind": "batch",
        "scoring": {"policy": "item_mistakes", "base": 10},
    },
    {
        "id": 9,
        "slug": "ransomware-rescue",
        "name": "Ransomware Rescue",
        "description": "Walk through a ransomware infection one decision at a time.",
        "kind": "sequential",
        "scoring": {"policy": "fraction_correct", "scale": 10},
    },
    {
        "id": 10,
        "slug": "incident-response",
        "name": "Incident Response",
        "description": "Lead a data-breach response from identification to lessons learned.",
        "kind": "sequential",
        "scoring": {"policy": "fraction_correct", "scale": 10},
    },
]
