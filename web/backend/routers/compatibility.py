#!/usr/bin/env python3
"""
Compatibility endpoints - trigger a compute-and-store run for a user.
"""

import logging
from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Query

from pipeline.runner import compute_and_store_compatibility
from ..exceptions import MissingUserIdException
from ..models.responses import CompatibilityTriggerResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["compatibility"])


@router.get("/calculate-compatibility", response_model=CompatibilityTriggerResponse, status_code=202)
def calculate_compatibility(
    background_tasks: BackgroundTasks,
    user_id: Optional[str] = Query(default=None, alias="userId", description="Subject user identifier")
):
    """
    Schedule a compatibility run for the given user.

    Returns as soon as the run is queued. The run itself happens after the
    response is sent; its outcome is only logged.
    """
    if not user_id or not user_id.strip():
        logger.warning("Url Param 'userId' is missing")
        raise MissingUserIdException("Url Param 'userId' is missing")

    user_id = user_id.strip()
    background_tasks.add_task(compute_and_store_compatibility, user_id)
    logger.info(f"Scheduled compatibility run for {user_id}")

    return CompatibilityTriggerResponse(
        success=True,
        user_id=user_id,
        message="Compatibility calculation scheduled"
    )
