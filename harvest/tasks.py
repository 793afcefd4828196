"""
Background tasks for the harvest app using Django-Q.
"""
import logging
from typing import Dict

from django_q.tasks import async_task

from .services import HarvestSyncService

logger = logging.getLogger(__name__)


def sync_harvest_projects_task() -> Dict[str, object]:
    """
    Run a full Harvest project sync.

    Can be called directly or queued via Django-Q's async_task().
    Unexpected errors propagate so Django-Q records the task as failed.
    """
    result = HarvestSyncService().sync_projects()
    if not result.success:
        logger.error("Harvest sync failed: %s", result.message)
    return result.to_dict()


def queue_harvest_sync() -> str:
    """
    Queue a Harvest sync on the Django-Q cluster.

    Returns:
        The Django-Q task id
    """
    task_id = async_task(
        'harvest.tasks.sync_harvest_projects_task',
        task_name='harvest-project-sync',
    )
    logger.info("Queued Harvest sync task %s", task_id)
    return task_id
