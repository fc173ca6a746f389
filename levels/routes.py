import logging

from flask import abort, current_app, flash, redirect, render_template, request, session, url_for
from flask_login import current_user, login_required

from .checks import password_checks, password_strength
from .definitions import LevelKind
from .errors import LevelError, PersistenceError, SessionClosedError
from .gateway import total_score
from .session import LevelSession, SessionState

logger = logging.getLogger(__name__)


def _session_key(level_id):
    return f"level_{level_id}"


def register_level_routes(app, levels, gateway):
    """Attach level, dashboard and progress routes to the Flask app."""
    app.extensions["levels"] = levels
    app.extensions["progress_gateway"] = gateway

    def _gateway():
        return current_app.extensions["progress_gateway"]

    def _level_or_404(level_id):
        level = current_app.extensions["levels"].get(level_id)
        if level is None:
            abort(404)
        return level

    def _start(level):
        lsession = LevelSession(level)
        session[_session_key(level.id)] = lsession.snapshot()
        return lsession

    def _resume(level):
        stored = session.get(_session_key(level.id))
        if stored is None:
            return _start(level)
        return LevelSession(level, SessionState.from_dict(stored))

    def _state_payload(lsession):
        state = lsession.state
        payload = state.to_dict()
        payload["total_items"] = len(lsession.level.items)
        if lsession.level.kind is not LevelKind.BATCH and not state.completed:
            payload["item"] = lsession.current_item().public()
        return payload

    def _rollback(lsession, before, message, status):
        lsession.restore(before)
        session[_session_key(lsession.level.id)] = before
        return {"error": message, "state": _state_payload(lsession)}, status

    def _finish(lsession, before):
        """Persist a just-completed session once, or roll it back on failure."""
        state = lsession.state
        try:
            _gateway().upsert(
                current_user.id,
                lsession.level.id,
                state.score,
                completed=True,
                attempts=state.attempts,
            )
        except PersistenceError as e:
            logger.warning("Level %s not saved for user %s: %s", lsession.level.id, current_user.id, e)
            return _rollback(lsession, before, "Failed to save progress. Please try again.", 503)
        except ValueError as e:
            # unknown level row or out-of-range score, retrying cannot help
            logger.error("Level %s cannot be recorded for user %s: %s", lsession.level.id, current_user.id, e)
            return _rollback(lsession, before, "This level cannot be recorded right now.", 500)
        session[_session_key(lsession.level.id)] = lsession.snapshot()
        return None

    def _apply(level, action):
        lsession = _resume(level)
        before = lsession.snapshot()
        try:
            outcome = action(lsession)
        except SessionClosedError as e:
            return {"error": str(e)}, 409
        except LevelError as e:
            return {"error": str(e)}, 400

        if outcome is not None and outcome.completed:
            failed = _finish(lsession, before)
            if failed:
                return failed
        else:
            session[_session_key(level.id)] = lsession.snapshot()

        body = {"state": _state_payload(lsession)}
        if outcome is not None:
            body.update(
                correct=outcome.correct,
                completed=outcome.completed,
                score=outcome.score,
                explanation=outcome.explanation,
            )
        return body, 200

    @app.route("/dashboard")
    @login_required
    def dashboard():
        levels = _gateway().list_levels()
        records = _gateway().list_progress(current_user.id)
        progress = {r.level_id: r for r in records}
        return render_template(
            "dashboard.html",
            levels=levels,
            progress=progress,
            total_score=total_score(records),
        )

    @app.route("/levels/<int:level_id>")
    @login_required
    def level_page(level_id):
        """Opening a level always starts a fresh playthrough."""
        level = _level_or_404(level_id)
        lsession = _start(level)
        return render_template(
            "level.html",
            level=level,
            items=[it.public() for it in level.items],
            state=_state_payload(lsession),
        )

    @app.route("/levels/<int:level_id>/answer", methods=["POST"])
    @login_required
    def level_answer(level_id):
        level = _level_or_404(level_id)
        data = request.get_json(silent=True) or {}
        return _apply(level, lambda s: s.answer(data.get("answer")))

    @app.route("/levels/<int:level_id>/toggle", methods=["POST"])
    @login_required
    def level_toggle(level_id):
        level = _level_or_404(level_id)
        data = request.get_json(silent=True) or {}
        item_id = str(data.get("item_id", ""))

        def _toggle(lsession):
            lsession.toggle(item_id)

        return _apply(level, _toggle)

    @app.route("/levels/<int:level_id>/submit", methods=["POST"])
    @login_required
    def level_submit(level_id):
        level = _level_or_404(level_id)
        data = request.get_json(silent=True) or {}
        selected = data.get("selected")
        if selected is not None:
            if not isinstance(selected, list):
                return {"error": "selected must be a list of item ids"}, 400
            selected = [str(i) for i in selected]
        return _apply(level, lambda s: s.submit(selected))

    @app.route("/api/password-strength", methods=["POST"])
    @login_required
    def api_password_strength():
        data = request.get_json(silent=True) or {}
        password = data.get("password")
        if not isinstance(password, str):
            password = ""
        return {"strength": password_strength(password), "checks": password_checks(password)}

    @app.route("/api/levels")
    @login_required
    def api_levels():
        return {"levels": _gateway().list_levels()}

    @app.route("/api/progress")
    @login_required
    def api_progress():
        records = _gateway().list_progress(current_user.id)
        return {
            "progress": [r.to_dict() for r in records],
            "total_score": total_score(records),
        }

    @app.route("/progress/reset", methods=["POST"])
    @login_required
    def reset_progress():
        try:
            removed = _gateway().reset_progress(current_user.id)
        except PersistenceError:
            flash("Could not reset progress. Please try again.")
        else:
            flash(f"Progress reset. {removed} level(s) cleared.")
        return redirect(url_for("dashboard"))
