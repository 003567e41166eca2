from .calculations import bucket_score, clamp, is_number, round_half_up

__all__ = ["bucket_score", "clamp", "is_number", "round_half_up"]
