from typing import Any, Callable

from util import log

# Decides what happens after a handler or routing failure:
# returning None continues with the next item, returning an exception aborts the whole notification.
ErrorPolicy = Callable[[Any, Exception], Exception | None]


def continue_on_error(context: Any, error: Exception) -> Exception | None:
    log.w("Webhook item failed, continuing with the rest of the notification", context, error)
    return None


def abort_on_error(context: Any, error: Exception) -> Exception | None:
    log.e("Webhook item failed, aborting the notification", context, error)
    return error
