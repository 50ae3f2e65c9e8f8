__all__ = [
    "verify_password",
    "get_password_hash",
    "authenticate_user",
    "get_current_user",
    "get_optional_user",
    "require_admin",
    "get_session_store",
]


def __getattr__(name):
    if name in {
        "verify_password",
        "get_password_hash",
        "authenticate_user",
        "get_current_user",
        "get_optional_user",
        "require_admin",
    }:
        from . import security as _security
        return getattr(_security, name)
    if name == "get_session_store":
        from . import session_store as _session_store
        return getattr(_session_store, name)
    raise AttributeError(f"module 'skillswap.utils' has no attribute '{name}'")
