from unittest.mock import Mock

from preventdeletion.relations import Relation, RelationKind
from tests.testapp.models import Author, Book, Publisher


def create_author(books=1, **kwargs):
    """Creates an author with a publisher and the given number of books."""
    if "publisher" not in kwargs:
        kwargs["publisher"] = Publisher.objects.create(name="Penguin")
    kwargs.setdefault("name", "Ursula")
    author = Author.objects.create(**kwargs)
    for i in range(books):
        Book.objects.create(author=author, title="Book {}".format(i + 1))
    return author


def mock_relation(name, kind=RelationKind.HAS_MANY, has_records=False):
    """Relation handle whose lookup is a Mock, so calls can be asserted on."""
    return Relation(name, kind, Mock(return_value=has_records))
