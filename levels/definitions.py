"""Immutable level definitions built from the tables in ``data.py``."""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from . import data
from .checks import caesar_cipher, is_strong_password, to_morse
from .errors import LevelConfigError
from .scoring import AttemptPenalty, CorrectCount, FractionCorrect, ItemMistakes

logger = logging.getLogger(__name__)

_TRUTHY = {"true", "yes", "1", "on"}
_FALSY = {"false", "no", "0", "off"}


class LevelKind(str, Enum):
    SEQUENTIAL = "sequential"  # one item at a time, must answer correctly to advance
    QUIZ = "quiz"  # one item at a time, every answer advances
    BATCH = "batch"  # toggle items freely, then submit once


@dataclass(frozen=True)
class ChallengeItem:
    id: str
    prompt: dict = field(default_factory=dict)
    answer: Any = None
    check: Optional[Callable[[str], bool]] = None
    explanation: str = ""
    options: tuple = ()

    @property
    def has_ground_truth(self) -> bool:
        return self.check is not None or self.answer is not None

    def is_correct(self, response) -> bool:
        """Compare a player response with the ground truth. Malformed input is simply wrong."""
        if self.check is not None:
            return isinstance(response, str) and bool(response) and self.check(response)
        if isinstance(self.answer, bool):
            return _as_bool(response) is self.answer
        if isinstance(response, str):
            return response.strip() == self.answer
        return False

    def public(self) -> dict:
        """The item as shown to the player, without its answer."""
        payload = {"id": self.id, **self.prompt}
        if self.options:
            payload["options"] = [{"id": o["id"], "text": o["text"]} for o in self.options]
        return payload


def _as_bool(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
    return None


@dataclass(frozen=True)
class LevelDefinition:
    id: int
    slug: str
    name: str
    description: str
    kind: LevelKind
    policy: Any
    items: tuple

    @property
    def max_points(self) -> int:
        return self.policy.max_points(len(self.items))

    def metadata(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "kind": self.kind.value,
            "max_points": self.max_points,
        }


# ---------------------------------------------------------------------------
# Item builders, one per level slug
# ---------------------------------------------------------------------------
def _password_items():
    return (
        ChallengeItem(
            id="password",
            prompt={"instruction": "Create a password with 8+ characters, numbers, upper and lower case letters and special characters."},
            check=is_strong_password,
        ),
    )


def _phishing_items():
    return tuple(
        ChallengeItem(
            id=e["id"],
            prompt={"from": e["from"], "subject": e["subject"], "content": e["content"]},
            answer=e.get("is_phishing"),
        )
        for e in data.PHISHING_EMAILS
    )


def _malware_items():
    return tuple(
        ChallengeItem(
            id=f["id"],
            prompt={"name": f["name"], "source": f["source"], "size": f["size"]},
            answer=f.get("is_malicious"),
        )
        for f in data.SUSPICIOUS_FILES
    )


def _morse_items():
    return (
        ChallengeItem(
            id="morse",
            prompt={"message": data.MORSE_MESSAGE},
            answer=to_morse(data.MORSE_MESSAGE),
        ),
    )


def _social_engineering_items():
    return tuple(
        ChallengeItem(
            id=s["id"],
            prompt={"question": s["question"]},
            answer=s.get("should_share"),
            explanation=s.get("explanation", ""),
        )
        for s in data.SOCIAL_ENGINEERING_SCENARIOS
    )


def _firewall_items():
    return tuple(
        ChallengeItem(
            id=r["id"],
            prompt={k: r[k] for k in ("type", "source", "port", "protocol", "risk")},
            answer=r.get("should_block"),
        )
        for r in data.TRAFFIC_RULES
    )


def _cipher_items():
    return tuple(
        ChallengeItem(
            id=m["id"],
            prompt={"ciphertext": caesar_cipher(m["plain"], m["key"]), "key": m["key"]},
            answer=m.get("plain"),
        )
        for m in data.CIPHER_MESSAGES
    )


def _privacy_items():
    return tuple(
        ChallengeItem(
            id=p["id"],
            prompt={"type": p["type"], "content": p["content"], "category": p["category"]},
            answer=p.get("should_be_private"),
        )
        for p in data.PRIVACY_ITEMS
    )


def _decision_items(steps):
    items = []
    for step in steps:
        correct = [o["id"] for o in step["options"] if o.get("correct")]
        items.append(
            ChallengeItem(
                id=step["id"],
                prompt={"title": step["title"], "description": step["description"]},
                answer=correct[0] if len(correct) == 1 else None,
                options=tuple(step["options"]),
            )
        )
    return tuple(items)


ITEM_BUILDERS = {
    "password-master": _password_items,
    "phishing-detective": _phishing_items,
    "malware-hunter": _malware_items,
    "morse-code-master": _morse_items,
    "social-engineering": _social_engineering_items,
    "firewall-fortress": _firewall_items,
    "data-encryption": _cipher_items,
    "social-media-sleuth": _privacy_items,
    "ransomware-rescue": lambda: _decision_items(data.RANSOMWARE_STEPS),
    "incident-response": lambda: _decision_items(data.INCIDENT_STEPS),
}

POLICIES = {
    "attempt_penalty": AttemptPenalty,
    "item_mistakes": ItemMistakes,
    "fraction_correct": FractionCorrect,
    "correct_count": CorrectCount,
}

# Which policies make sense for which interaction style.
_KIND_POLICIES = {
    LevelKind.SEQUENTIAL: (AttemptPenalty, FractionCorrect),
    LevelKind.QUIZ: (CorrectCount,),
    LevelKind.BATCH: (ItemMistakes,),
}


def build_policy(options: dict):
    options = dict(options)
    name = options.pop("policy", None)
    if name not in POLICIES:
        raise LevelConfigError(f"unknown scoring policy {name!r}")
    try:
        policy = POLICIES[name](**options)
    except TypeError as e:
        raise LevelConfigError(f"bad options for {name}: {e}") from e
    policy.validate()
    return policy


def build_level(raw: dict, items=None) -> LevelDefinition:
    """Build and validate one level. Raises LevelConfigError on any inconsistency."""
    try:
        kind = LevelKind(raw["kind"])
    except (KeyError, ValueError) as e:
        raise LevelConfigError(f"level {raw.get('id')}: bad kind {raw.get('kind')!r}") from e
    policy = build_policy(raw.get("scoring", {}))
    if not isinstance(policy, _KIND_POLICIES[kind]):
        raise LevelConfigError(
            f"level {raw.get('id')}: {type(policy).__name__} cannot score a {kind.value} level"
        )
    if items is None:
        builder = ITEM_BUILDERS.get(raw.get("slug"))
        if builder is None:
            raise LevelConfigError(f"level {raw.get('id')}: no items for slug {raw.get('slug')!r}")
        items = builder()
    items = tuple(items)
    if not items:
        raise LevelConfigError(f"level {raw.get('id')}: has no items")
    ids = [it.id for it in items]
    if len(set(ids)) != len(ids):
        raise LevelConfigError(f"level {raw.get('id')}: duplicate item ids")
    for it in items:
        if not it.has_ground_truth:
            raise LevelConfigError(f"level {raw.get('id')}: item {it.id} has no ground truth")
        if kind is LevelKind.BATCH and not isinstance(it.answer, bool):
            raise LevelConfigError(f"level {raw.get('id')}: item {it.id} needs a yes/no label")
    return LevelDefinition(
        id=raw["id"],
        slug=raw["slug"],
        name=raw["name"],
        description=raw.get("description", ""),
        kind=kind,
        policy=policy,
        items=items,
    )


def load_levels(table=None) -> dict:
    """Build every level in ``table``; a broken level is logged and left out."""
    levels = {}
    for raw in table if table is not None else data.LEVEL_TABLE:
        try:
            level = build_level(raw)
        except LevelConfigError as e:
            logger.error("Level %s not loaded: %s", raw.get("id"), e)
            continue
        levels[level.id] = level
    return levels
