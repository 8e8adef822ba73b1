"""
Neon Pig - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

DIE_FACES = 6


def validate_die_value(value: int, faces: int = DIE_FACES) -> int:
    """
    Validate a single die face.

    Args:
        value: Face value to validate
        faces: Number of faces on the die

    Returns:
        Validated value

    Raises:
        ValueError: If value is not an integer in [1, faces]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Die value must be an integer, got {type(value).__name__}.")

    if not (1 <= value <= faces):
        raise ValueError(f"Die value is {value}, must be between 1 and {faces}.")

    return value


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Args:
        score: Score to validate
        allow_negative: Whether negative scores are allowed

    Returns:
        Validated score

    Raises:
        ValueError: If score is invalid
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score
