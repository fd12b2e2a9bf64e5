# --- checkout_api/utils/api.py ---
from datetime import datetime, timezone

def _api_time():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")

def api_ok(message, data=None):
    return {
        "status": True,
        "message": message,
        "data": data,
        "API_TIME_HUMAN": _api_time(),
    }

def api_error(message, data=None):
    return {
        "status": False,
        "message": message,
        "data": data,
        "API_TIME_HUMAN": _api_time(),
    }

# ---- tagged results (checkout boundary) -------------------------------------
# No timestamps here: identical inputs must serialize identically.

def result_ok(data):
    return {"success": True, "data": data}

def result_error(message: str, kind: str):
    return {"success": False, "error": message, "kind": kind}
