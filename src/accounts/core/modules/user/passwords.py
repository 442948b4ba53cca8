import bcrypt

# bcrypt only uses the first 72 bytes of a password; newer releases raise instead of truncating
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8", errors="surrogatepass")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with a freshly generated bcrypt salt of the given cost."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
