"""Simple password authentication for the JSON API."""
from functools import wraps
from datetime import datetime, UTC, timedelta

from flask import current_app, session

from web.utils.responses import error_response


def is_authenticated():
    """Check if the current session is authenticated."""
    if not current_app.config.get('APP_PASSWORD'):
        return True  # No password configured, allow access

    if not session.get('authenticated'):
        return False

    auth_time = session.get('auth_time')
    if auth_time:
        timeout_minutes = current_app.config.get('SESSION_TIMEOUT_MINUTES', 480)
        expiry = datetime.fromisoformat(auth_time) + timedelta(minutes=timeout_minutes)
        if datetime.now(UTC) > expiry:
            session.clear()
            return False

    return True


def login_required(f):
    """Decorator rejecting unauthenticated API calls with a JSON 401."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_authenticated():
            return error_response('Authentication required', 401)
        return f(*args, **kwargs)
    return decorated_function


def authenticate(password):
    """Attempt to authenticate with the given password."""
    app_password = current_app.config.get('APP_PASSWORD')
    if not app_password:
        return True
    if password == app_password:
        session['authenticated'] = True
        session['auth_time'] = datetime.now(UTC).isoformat()
        session.permanent = True
        return True
    return False


def logout():
    """Clear the authentication session."""
    session.pop('authenticated', None)
    session.pop('auth_time', None)
