"""Unit tests for roa.domain.errors"""

import pytest

from roa.domain import errors

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "exc, message",
    [
        (errors.ResourceNotFoundError("books", 5), "books (5) not found."),
        (
            errors.ParentNotFoundError("chapters", "book"),
            "Parent 'book' of 'chapters' not found.",
        ),
        (errors.UnknownResourceTypeError("authors"), "Unknown resource type 'authors'."),
        (
            errors.DuplicateResourceTypeError("books"),
            "Resource type 'books' is already registered.",
        ),
        (
            errors.UnknownRelationError("chapters", "author"),
            "Resource type 'chapters' has no relation 'author'.",
        ),
        (
            errors.ParentCycleError("folders", "3"),
            "Parent chain of folders (3) loops back on itself.",
        ),
        (errors.AuthorizationError(), "Access denied."),
    ],
)
def test_error_messages(exc, message):
    """Errors render a readable message."""
    assert str(exc) == message
    assert isinstance(exc, errors.RoaError)


def test_unresolved_link_error_names_resource():
    """The sequencing error names the unresolved resource."""
    exc = errors.UnresolvedLinkError("chapters")
    assert exc.resource == "chapters"
    assert "'chapters' has not been resolved" in str(exc)
    assert isinstance(exc, errors.LinkError)


@pytest.mark.parametrize(
    "exc, status_code",
    [
        (errors.ResourceNotFoundError("books", 5), 404),
        (errors.ParentNotFoundError("chapters", "book"), 404),
        (errors.ParentCycleError("folders", "3"), 409),
        (errors.AuthorizationError(), 403),
        (errors.AuthorizationError("Login required.", status_code=401), 401),
    ],
)
def test_status_codes(exc, status_code):
    """Errors reaching the transport boundary carry an HTTP status."""
    assert exc.status_code == status_code
