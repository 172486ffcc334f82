import hashlib


def make_token(username: str, password: str) -> str:
    # not a credential scheme, just a checksum of the concatenation
    return hashlib.sha1((username + password).encode("utf-8")).hexdigest()
