from enum import Enum
from typing import Callable, List

from django.db import models
from django.db.models import ForeignObjectRel


class RelationKind(Enum):
    """The variants of relation a model can have, seen from the model itself."""

    # Reverse one-to-one, the other row points at this one
    HAS_ONE = "has_one"
    # This row points at a parent, e.g. a ForeignKey or forward OneToOneField
    BELONGS_TO = "belongs_to"
    # Reverse foreign key, many-to-many or generic relation
    HAS_MANY = "has_many"


class Relation:
    """Handle to one named relation of a model instance.

    Attributes:
        name: The name the relation is reachable by on the instance.
        kind: The RelationKind of the relation.
        has_records: Callable without arguments that looks up whether the
            relation currently has at least one record. It is not called
            until it is needed, because it usually hits the database.
    """

    def __init__(self, name: str, kind: RelationKind, has_records: Callable[[], bool]):
        self.name = name
        self.kind = kind
        self.has_records = has_records

    def __repr__(self):
        return "<Relation {}: {}>".format(self.name, self.kind.value)

    def is_belongs_to(self) -> bool:
        return self.kind is RelationKind.BELONGS_TO

    def exists(self) -> bool:
        return bool(self.has_records())

    def blocks_deletion(self) -> bool:
        """Whether this relation keeps the instance from being deleted.

        A reference to a parent never blocks. The kind is checked before the
        lookup so a parent reference is never queried.
        """
        return not self.is_belongs_to() and self.exists()


def get_relation_kind(field) -> RelationKind:
    if field.many_to_one or (field.one_to_one and field.concrete):
        return RelationKind.BELONGS_TO
    if field.one_to_one:
        return RelationKind.HAS_ONE
    return RelationKind.HAS_MANY


def get_relation_name(field) -> str:
    if isinstance(field, ForeignObjectRel):
        return field.get_accessor_name()
    return field.name


def _has_records_callable(instance: models.Model, field, name: str, kind: RelationKind):
    # No row can point at an unsaved instance, and Django refuses the lookup for it
    if kind is RelationKind.HAS_MANY:
        return lambda: instance.pk is not None and getattr(instance, name).exists()
    if kind is RelationKind.HAS_ONE:
        # Query instead of using the accessor, which caches the related object on the instance
        return lambda: instance.pk is not None and (
            field.related_model._base_manager.filter(
                **{field.field.name: instance}
            ).exists()
        )
    if field.concrete:
        return lambda: getattr(instance, field.attname) is not None
    return lambda: getattr(instance, field.name) is not None


def get_model_relations(instance: models.Model) -> List[Relation]:
    """Lists the relations declared on the model class of the instance.

    Only relations of the model itself are included, not those inherited
    from a concrete parent model. Reverse relations hidden with a
    related_name ending in '+' are left out as they have no accessor.
    """
    relations = []
    for field in instance._meta.get_fields(include_parents=False):
        if not field.is_relation:
            continue
        name = get_relation_name(field)
        if not name or name.endswith("+"):
            continue
        kind = get_relation_kind(field)
        relations.append(
            Relation(name, kind, _has_records_callable(instance, field, name, kind))
        )
    return relations
