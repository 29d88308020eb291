from typing import List

from preventdeletion.guard import Decision, DeletionGuard
from preventdeletion.relations import Relation, get_model_relations


class PreventDeletionMixin:
    """Model mixin that refuses deletion while the record has related records.

    Usage:
        class Author(PreventDeletionMixin, models.Model):
            excluded_relations = ["log_entries"]

            def specific_conditions(self):
                return [(self.is_locked, "Locked authors cannot be deleted.")]

    The check runs in the pre_delete signal, so it covers Model.delete(),
    QuerySet.delete() and cascades. A refused deletion raises
    PreventDeletionError.

    Attributes:
        excluded_relations: Relation names that never block deletion.
        included_relations: When set, only these relation names can block deletion.
        deletion_message: Replaces any message of a refused deletion.

    All three can be overridden on an instance as well.
    """

    excluded_relations = None
    included_relations = None
    deletion_message = None

    def specific_conditions(self):
        """Override to refuse deletion on custom grounds.

        Should return an ordered list of (condition, message) pairs. The first
        pair with a true condition refuses the deletion with its message.
        Conditions may be callables, which are only called when reached.
        """
        return []

    def get_specific_conditions(self):
        return list(self.specific_conditions())

    def get_deletion_relations(self) -> List[Relation]:
        """The relations considered for blocking, by default all relations declared on the model."""
        return get_model_relations(self)

    def get_deletion_message(self, default):
        if self.deletion_message is not None:
            return self.deletion_message
        return default

    def check_deletion(self, log=False) -> Decision:
        """Evaluates whether this instance may be deleted, without raising.

        A refusal is only logged when log is True, as nothing is being deleted.
        """
        return DeletionGuard().evaluate(self, log=log)

    def can_be_deleted(self) -> bool:
        return self.check_deletion().allowed
