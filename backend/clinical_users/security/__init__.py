from clinical_users.security.passwords import hash_password

__all__ = ["hash_password"]
