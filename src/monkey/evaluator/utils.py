# src/monkey/evaluator/utils.py
import logging

from ..object import Null, Boolean as BooleanObj, EvaluationError, ReturnValue
from ..config import config as monkey_config

logger = logging.getLogger("monkey.evaluator")

# Global Constants
NULL, TRUE, FALSE = Null(), BooleanObj(True), BooleanObj(False)


def native_bool_to_boolean_obj(value):
    return TRUE if value else FALSE


def is_error(obj):
    return isinstance(obj, EvaluationError)


def is_truthy(obj):
    """Only null and false are falsy; 0 and "" are truthy."""
    if isinstance(obj, Null):
        return False
    if isinstance(obj, BooleanObj):
        return obj.value
    return True


def new_error(message):
    return EvaluationError(message)


def debug_log(message, data=None, level='debug'):
    """Conditional debug logging that respects the user's persistent config."""
    if not monkey_config.should_log(level):
        return

    if data is not None:
        logger.debug("%s: %s", message, data)
    else:
        logger.debug("%s", message)


def is_control(obj):
    """True for the wrappers that must propagate instead of being bound or stored."""
    return isinstance(obj, (ReturnValue, EvaluationError))
