import random

# Two-digit entity codes
TYPE_POSTFIX = {
    "users": 1,
    "connection_requests": 2,
}


def generate_random_id(entity: str) -> int:
    """Returns a 12-digit id: 10 random digits + a 2-digit entity postfix."""
    if entity not in TYPE_POSTFIX:
        raise ValueError(f"Unknown entity for ID generation: {entity}")
    rand10 = random.randint(1_000_000_000, 9_999_999_999)
    postfix = TYPE_POSTFIX[entity]
    return rand10 * 100 + postfix


# Largest value a BIGINT column holds
MAX_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """Ids outside the BIGINT range cannot exist in the store."""
    return 1 <= value <= MAX_ID
