import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Tuple

from preventdeletion.conf import get_setting
from preventdeletion.exceptions import PreventDeletionError


@dataclass(frozen=True)
class SpecificCondition:
    """A custom rule that prevents deletion while its condition holds.

    The condition is either a value whose truth is used, or a callable without
    arguments which is called when the guard evaluates it.
    """

    condition: object
    message: str

    @classmethod
    def coerce(cls, entry) -> "SpecificCondition":
        """Accepts a SpecificCondition, a (condition, message) pair or a dict with those keys."""
        if isinstance(entry, cls):
            return entry
        if isinstance(entry, Mapping):
            return cls(condition=entry["condition"], message=entry["message"])
        condition, message = entry
        return cls(condition=condition, message=message)

    def holds(self) -> bool:
        if callable(self.condition):
            return bool(self.condition())
        return bool(self.condition)


@dataclass(frozen=True)
class Decision:
    """Outcome of evaluating a deletion.

    Evaluates to False when the deletion is denied.
    """

    allowed: bool
    message: Optional[str] = None
    # Names of the relations with records, if those were the reason for denial
    relations: Tuple[str, ...] = ()

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, message, relations=()) -> "Decision":
        return cls(allowed=False, message=message, relations=tuple(relations))

    def __bool__(self):
        return self.allowed


class DeletionGuard:
    """Decides whether a model instance may be deleted.

    The instance is expected to provide the PreventDeletionMixin interface.
    Nothing is cached between evaluations, every call looks at the current
    state of the conditions and relations.

    Args:
        logger: Logger that receives a warning for each refused deletion.
            Defaults to the logger named in the PREVENT_DELETION settings.
    """

    log_prefix = "Deletion prevented: "

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(get_setting("LOGGER"))

    def evaluate(self, instance, log=True) -> Decision:
        """Decides whether the instance may be deleted.

        Args:
            instance: The model instance about to be deleted.
            log: Whether a refusal is logged as a warning. Pass False when no
                deletion is being attempted.
        """
        for entry in instance.get_specific_conditions():
            condition = SpecificCondition.coerce(entry)
            if condition.holds():
                message = instance.get_deletion_message(condition.message)
                return self._deny(message, log=log)

        relations = self.get_blocking_relations(instance)
        if relations:
            message = get_setting("MESSAGE").format(relations=", ".join(relations))
            message = instance.get_deletion_message(message)
            return self._deny(message, relations, log=log)

        return Decision.allow()

    def enforce(self, instance):
        """Evaluates the deletion and raises PreventDeletionError when it is denied."""
        decision = self.evaluate(instance)
        if not decision:
            raise PreventDeletionError(decision.message)
        return decision

    def get_blocking_relations(self, instance) -> Tuple[str, ...]:
        """Returns the names of the relations that currently have records.

        Relations filtered out by the excluded or included lists are skipped
        before any lookup is done. When a name is on both lists it is excluded.
        """
        excluded = instance.excluded_relations
        included = instance.included_relations

        blocking = []
        for relation in instance.get_deletion_relations():
            if excluded is not None and relation.name in excluded:
                continue
            if included is not None and relation.name not in included:
                continue
            if relation.blocks_deletion():
                blocking.append(relation.name)
        return tuple(blocking)

    def _deny(self, message, relations=(), log=True) -> Decision:
        if log:
            self.logger.warning(self.log_prefix + message)
        return Decision.deny(message, relations)
