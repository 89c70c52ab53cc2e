"""Helpers for building vote commitments on the caller's side.

The registry treats commitments as opaque strings and never calls these.
They exist so front ends and test harnesses produce commitments in the same
format: 64 lowercase hex characters of SHA-256.
"""

import hashlib
import secrets

from zkvote.models import VoteCommitment

SALT_BYTES = 16


def generate_salt(nbytes: int = SALT_BYTES) -> str:
    """Return a random hex salt for hiding the ballot contents."""
    return secrets.token_hex(nbytes)


def compute_commitment(ballot: str, salt: str) -> VoteCommitment:
    """Commit to a ballot by hashing it together with a salt.

    Args:
        ballot: The ballot contents (e.g. a candidate identifier)
        salt: Secret salt kept by the voter to open the commitment later

    Returns:
        VoteCommitment wrapping the hex SHA-256 of "salt:ballot"
    """
    combined = f"{salt}:{ballot}"
    return VoteCommitment(hashlib.sha256(combined.encode("utf-8")).hexdigest())
