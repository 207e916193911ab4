"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.annual_review.config import Settings
from src.annual_review.core.services.book_review_meeting import BookReviewMeetingWorkflow
from src.annual_review.logging import configure_logging


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # RESOURCES - run by init_resources()
    # =========================================================================
    logging_setup = providers.Resource(
        configure_logging,
        level=config.provided.log_level,
    )

    # =========================================================================
    # COLLABORATORS
    # No persistence-backed calendar exists yet; override this provider to
    # enforce the due date rules that depend on the last review.
    # =========================================================================
    review_calendar = providers.Object(None)

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    book_review_meeting = providers.Factory(
        BookReviewMeetingWorkflow,
        calendar=review_calendar,
        date_format=config.provided.annual_review.due_date_format,
    )
