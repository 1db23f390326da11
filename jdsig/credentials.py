import os

ACCESS_KEY_ENV = 'JDCLOUD_ACCESS_KEY'
SECRET_KEY_ENV = 'JDCLOUD_SECRET_KEY'


class Credential:
    """Long-term JD Cloud access key pair."""

    __slots__ = ('access_key', 'secret_key')

    def __init__(self, access_key: str, secret_key: str) -> None:
        self.access_key = access_key
        self.secret_key = secret_key

    @classmethod
    def from_env(cls, access_key_var: str = ACCESS_KEY_ENV, secret_key_var: str = SECRET_KEY_ENV) -> 'Credential':
        """Load the key pair from environment variables.

        Missing variables produce an invalid credential rather than an error;
        the signer rejects it when it is first used.
        """
        return cls(os.getenv(access_key_var, ''), os.getenv(secret_key_var, ''))

    def is_valid(self) -> bool:
        return bool(self.access_key) and bool(self.secret_key)

    def __repr__(self) -> str:
        return f"Credential(access_key={self.access_key!r}, secret_key='***')"
