"""
Per-request notification collection.
"""
from shared.infrastructure.notifications import CollectingNotifier

ATTRIBUTE = '_storefront_notifier'


def get_notifier(request) -> CollectingNotifier:
    """Return the notifier bound to this request, creating it on first use."""
    # DRF wraps the Django request; keep the notifier on the inner one
    raw = getattr(request, '_request', request)
    notifier = getattr(raw, ATTRIBUTE, None)
    if notifier is None:
        notifier = CollectingNotifier()
        setattr(raw, ATTRIBUTE, notifier)
    return notifier


def with_notifications(request, payload: dict) -> dict:
    """Attach collected notifications to a response payload."""
    payload['notifications'] = get_notifier(request).as_list()
    return payload
