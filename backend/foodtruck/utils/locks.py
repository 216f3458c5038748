import os

from filelock import FileLock

from foodtruck.config import Settings


def user_lock(settings: Settings, user_id: int) -> FileLock:
    """
    Inter-process lock guarding one user's cart.

    Adding to the cart and placing an order both hold it, so the one-truck
    check and the read-bill-clear of checkout never interleave for a user.
    """
    locks_dir = os.path.join(settings.LOCKS_DIR, "foodtruck_locks")
    os.makedirs(locks_dir, exist_ok=True)
    return FileLock(os.path.join(locks_dir, f"cart_user_{user_id}.lock"))
