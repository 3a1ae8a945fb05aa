"""Example usage of the actionable-points client.

Run against a live endpoint with:
    ACTIONABLE_POINTS_BASE_URL=http://localhost:3000 python -m actionpoints.demo
"""
from __future__ import annotations

import asyncio

from actionpoints.clients.actionable_points_client import ActionablePointsClient, extract_actionable_points
from actionpoints.logging import get_logger, log_points_extracted
from actionpoints.schemas.actionable_points import ActionablePointsResponse

SAMPLE_TRANSCRIPTION = """
    Today we discussed the Q1 project timeline. John needs to complete the UI design by Friday,
    and Sarah will review the backend changes next week. We also need to schedule a client
    presentation for next month. Mike mentioned that the database migration should be done
    by the end of this week.
"""
SAMPLE_CONTEXT = "Weekly team standup meeting"


async def process_meeting_transcription(client: ActionablePointsClient | None = None,
                                        logger=None) -> ActionablePointsResponse | None:
    log = logger or get_logger("actionpoints.demo")
    try:
        result = await extract_actionable_points(SAMPLE_TRANSCRIPTION, SAMPLE_CONTEXT, client=client, logger=log)
    except Exception as e:
        log.error("Failed to process transcription: %r", e)
        return None

    log_points_extracted(
        len(result.actionable_points), logger=log,
        points=result.model_dump(by_alias=True)["actionablePoints"],
    )
    for point in result.actionable_points:
        log.info(f"- {point.title} ({point.priority} priority)")
        log.info(f"  Description: {point.description}")
        if point.due_date:
            log.info(f"  Due: {point.due_date}")
        if point.assignee:
            log.info(f"  Assignee: {point.assignee}")
    return result


if __name__ == "__main__":
    asyncio.run(process_meeting_transcription())
