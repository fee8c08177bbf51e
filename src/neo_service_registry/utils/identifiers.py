"""Identifier utilities for neo-service-registry."""

import hashlib
import threading
import time

# Largest value a signed 64-bit directory integer can hold
MAX_SERVICE_ID = (1 << 63) - 1

_id_lock = threading.Lock()
_last_id = 0


def generate_service_id() -> int:
    """
    Generate a new registered service identifier.
    
    Identifiers are derived from the wall clock in nanoseconds, which keeps
    them time-ordered across restarts. Within a process they are strictly
    increasing, even when the clock resolution is coarser than the call rate.
    
    Returns:
        Strictly positive integer identifier
    """
    global _last_id
    
    with _id_lock:
        candidate = time.time_ns()
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return candidate


def stable_dn_hash(dn: str) -> int:
    """
    Derive a stable identifier from a distinguished name.
    
    Unlike the builtin hash(), the result does not change between processes,
    so a service recovered this way keeps the same identifier on every load.
    
    Args:
        dn: Distinguished name of the directory entry
        
    Returns:
        Positive 63-bit integer
    """
    digest = hashlib.blake2b(dn.strip().lower().encode("utf-8"), digest_size=8).digest()
    return (int.from_bytes(digest, byteorder="big") & MAX_SERVICE_ID) or 1
