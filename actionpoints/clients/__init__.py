from .base import ActionablePointsError, ActionablePointsHTTPError
from .actionable_points_client import ActionablePointsClient, extract_actionable_points

__all__ = [
    'ActionablePointsError','ActionablePointsHTTPError',
    'ActionablePointsClient','extract_actionable_points',
]
