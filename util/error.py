import httpx
from contextlib import contextmanager
from error import DeliveryFailureError


@contextmanager
def handle_delivery_error(operation):
    """Context manager to turn transport errors into DeliveryFailureError"""
    try:
        yield
    except httpx.TimeoutException as e:
        raise DeliveryFailureError(f"Timed out during {operation}") from e
    except httpx.HTTPError as e:
        raise DeliveryFailureError(f"Error during {operation}: {str(e)}") from e
