import logging
from datetime import datetime

from bloodportal.extensions import scheduler

logger = logging.getLogger(__name__)

POLL_JOB_ID = 'poll_blood_requests'


def start_polling(app, feed):
    """Run feed.load_requests now and then every POLL_INTERVAL_SECONDS.

    Ticks are not skipped while an earlier fetch is still in flight (up to
    POLL_MAX_INSTANCES at once); in-flight fetches are never cancelled.
    """
    interval = app.config['POLL_INTERVAL_SECONDS']
    scheduler.add_job(
        id=POLL_JOB_ID,
        func=feed.load_requests,
        trigger='interval',
        seconds=interval,
        next_run_time=datetime.now(),  # initial load
        max_instances=app.config['POLL_MAX_INSTANCES'],
        coalesce=False,
        replace_existing=True,
    )
    if not scheduler.running:
        scheduler.start()
    logger.info('Polling %s every %ss', app.config['BACKEND_URL'], interval)


def stop_polling():
    """Cancel the poll job; safe to call more than once."""
    if scheduler.get_job(POLL_JOB_ID):
        scheduler.remove_job(POLL_JOB_ID)
        logger.info('Stopped polling for blood requests')
    if scheduler.running:
        scheduler.shutdown(wait=False)
