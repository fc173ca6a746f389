import logging
import os
from datetime import datetime, timedelta, timezone

from flask import Flask, render_template, request, redirect, url_for, flash
from flask_sqlalchemy import SQLAlchemy
from flask_login import (
    LoginManager, login_user, login_required, logout_user,
    current_user, UserMixin
)
from werkzeug.middleware.proxy_fix import ProxyFix
from werkzeug.security import generate_password_hash, check_password_hash

from config import Config
from levels import PersistenceError, SQLAlchemyProgressGateway, load_levels
from levels.routes import register_level_routes

# -----------------------------------------------------------------------------
# App & DB setup
# -----------------------------------------------------------------------------
app = Flask(__name__, static_folder="static", template_folder="templates")
app.config.from_object(Config)
app.config["REMEMBER_COOKIE_DURATION"] = timedelta(days=30)
app.config["PREFERRED_URL_SCHEME"] = "https"
app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

logging.basicConfig(
    level=app.config["LOG_LEVEL"],
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

db = SQLAlchemy(app)

login_manager = LoginManager(app)
login_manager.login_view = "login"


@app.context_processor
def inject_now():
    return {"now": lambda: datetime.now(timezone.utc)}

# -----------------------------------------------------------------------------
# Models
# -----------------------------------------------------------------------------
class User(db.Model, UserMixin):
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True)
    password_hash = db.Column(db.String(256), nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))


class Level(db.Model):
    id = db.Column(db.Integer, primary_key=True)  # matches the level table id
    slug = db.Column(db.String(80), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text)
    kind = db.Column(db.String(20), nullable=False)
    max_points = db.Column(db.Integer, nullable=False, default=10)


class UserProgress(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False, index=True)
    level_id = db.Column(db.Integer, db.ForeignKey("level.id"), nullable=False)
    score = db.Column(db.Integer, nullable=False, default=0)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    attempts = db.Column(db.Integer)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    __table_args__ = (db.UniqueConstraint("user_id", "level_id"),)

# -----------------------------------------------------------------------------
# Levels
# -----------------------------------------------------------------------------
LEVELS = load_levels()
progress_gateway = SQLAlchemyProgressGateway(db, User, Level, UserProgress)
register_level_routes(app, LEVELS, progress_gateway)


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


@app.errorhandler(PersistenceError)
def handle_persistence_error(e):
    logger.error("Store unavailable: %s", e)
    if request.path.startswith("/api/"):
        return {"error": str(e)}, 503
    return render_template("error.html", message=str(e)), 503

# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@app.route("/")
def index():
    return render_template("index.html", levels=[lvl.metadata() for lvl in LEVELS.values()])


@app.route("/login", methods=["GET", "POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("dashboard"))
    if request.method == "POST":
        username = request.form.get("username", "").strip()
        password = request.form.get("password", "")
        user = User.query.filter_by(username=username).first()
        if user and check_password_hash(user.password_hash, password):
            login_user(user, remember=True)
            logger.info("User %s logged in", user.id)
            return redirect(url_for("dashboard"))
        flash("Invalid credentials.")
    return render_template("login.html")


@app.route("/signup", methods=["GET", "POST"])
def signup():
    if current_user.is_authenticated:
        return redirect(url_for("dashboard"))
    if request.method == "POST":
        u = request.form.get("username", "").strip()
        email = request.form.get("email", "").strip() or None
        pw = request.form.get("password", "")
        cpw = request.form.get("confirm", "")
        if not u or not pw:
            flash("Username and password required.")
        elif pw != cpw:
            flash("Passwords do not match.")
        elif User.query.filter_by(username=u).first():
            flash("Username already taken.")
        elif email and User.query.filter_by(email=email).first():
            flash("Email already registered.")
        else:
            user = User(username=u, email=email, password_hash=generate_password_hash(pw))
            db.session.add(user)
            db.session.commit()
            login_user(user, remember=True)
            logger.info("New user %s signed up", user.id)
            return redirect(url_for("dashboard"))
    return render_template("signup.html")


@app.route("/logout")
@login_required
def logout():
    logout_user()
    return redirect(url_for("index"))


@app.route("/leaderboard")
def leaderboard():
    rows = progress_gateway.leaderboard(limit=app.config["LEADERBOARD_SIZE"])
    return render_template("leaderboard.html", rows=rows)


@app.route("/api/leaderboard")
def api_leaderboard():
    return {"leaderboard": progress_gateway.leaderboard(limit=app.config["LEADERBOARD_SIZE"])}

# -----------------------------------------------------------------------------
# Seed
# -----------------------------------------------------------------------------
def seed_data():
    """Create tables and sync the Level rows with the loaded level definitions."""
    db.create_all()
    for level in LEVELS.values():
        row = db.session.get(Level, level.id)
        if row is None:
            row = Level(id=level.id)
            db.session.add(row)
        row.slug = level.slug
        row.name = level.name
        row.description = level.description
        row.kind = level.kind.value
        row.max_points = level.max_points
    db.session.commit()
    logger.info("Seeded %d levels", len(LEVELS))

# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    with app.app_context():
        seed_data()
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)), debug=True)
