from passlib.context import CryptContext

# New hashes use pbkdf2_sha256; bcrypt hashes imported from older
# deployments still verify and are flagged for upgrade.
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # unrecognised or corrupt hash
        return False

def needs_rehash(hashed: str) -> bool:
    return pwd_context.needs_update(hashed)
