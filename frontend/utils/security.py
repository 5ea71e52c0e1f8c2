"""
Password hashing helpers.

Stored values that passlib does not recognise as a hash, or that only look
like one, are treated as legacy plaintext and compared in constant time.
"""
import hmac

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def is_hashed(stored: str) -> bool:
    """True if the stored value is a hash passlib can verify."""
    return pwd_context.identify(stored) is not None


def verify_password(plain_password: str, stored: str) -> bool:
    """
    Verify a plain password against a stored hash or legacy plaintext.
    
    Args:
        plain_password: The plain text password to verify
        stored: The stored password value
        
    Returns:
        True if password matches, False otherwise
    """
    if is_hashed(stored):
        try:
            return pwd_context.verify(plain_password, stored)
        except ValueError:
            # Hash prefix on a value that is not a well-formed hash
            pass
    return hmac.compare_digest(plain_password.encode("utf-8"), stored.encode("utf-8"))
