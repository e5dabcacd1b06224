from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, VerificationError, InvalidHashError

hasher = PasswordHasher()


# Only the hash is ever stored. Every call salts differently, so two hashes of
# the same password never match each other; compare with verify_password.
def hash_password(password: str) -> str:
    return hasher.hash(password)


def verify_password(hashed: str, password: str) -> bool:
    try:
        return hasher.verify(hashed, password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError):
        # corrupt stored hash, treat as a failed login
        return False