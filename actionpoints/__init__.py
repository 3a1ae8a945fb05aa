from actionpoints.clients import (
    ActionablePointsClient,
    ActionablePointsError,
    ActionablePointsHTTPError,
    extract_actionable_points,
)
from actionpoints.schemas.actionable_points import ActionablePoint, ActionablePointsResponse

__all__ = [
    'ActionablePoint', 'ActionablePointsResponse',
    'ActionablePointsClient', 'ActionablePointsError', 'ActionablePointsHTTPError',
    'extract_actionable_points',
]
