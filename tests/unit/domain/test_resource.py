"""Unit tests for roa.domain.resource (types, binding, validation, relations)."""

import logging

import pytest

from roa.domain.errors import UnknownRelationError
from roa.domain.resource import (
    DEFAULT_SCENARIO,
    Relation,
    ResourceNode,
    ResourceType,
    UnknownScenarioError,
)

# pylint: disable=magic-value-comparison


class TestResourceType:
    """Tests for ResourceType configuration."""

    @staticmethod
    def test_parent_relation_must_be_declared():
        """A parent relation missing from `relations` is rejected."""
        with pytest.raises(UnknownRelationError, match="has no relation 'book'"):
            ResourceType(name="chapters", parent_relation="book")

    @staticmethod
    @pytest.mark.parametrize(
        "base_url, expected",
        [
            ("", "/books"),
            ("/api", "/api/books"),
            ("/api/", "/api/books"),
            ("https://example.com/v1//", "https://example.com/v1/books"),
        ],
    )
    def test_collection_link(base_url, expected):
        """Root collection links join the base URL and the type name."""
        assert ResourceType(name="books", base_url=base_url).collection_link == expected

    @staticmethod
    def test_safe_attributes_default_and_named_scenarios(registry):
        """The default scenario uses `fields`; named scenarios override it."""
        chapters = registry.get("chapters")
        assert chapters.safe_attributes() == ("book_id", "title")
        assert chapters.safe_attributes(DEFAULT_SCENARIO) == ("book_id", "title")
        assert chapters.safe_attributes("import") == ("id", "book_id", "title")

    @staticmethod
    def test_unknown_scenario_raises(registry):
        """Undeclared scenarios are rejected."""
        with pytest.raises(UnknownScenarioError, match="Unknown scenario 'bulk'"):
            registry.get("books").safe_attributes("bulk")

    @staticmethod
    def test_relation_lookup(registry):
        """relation() returns the declared relation or raises."""
        chapters = registry.get("chapters")
        assert chapters.relation("book") == Relation("books", "book_id")
        with pytest.raises(UnknownRelationError):
            chapters.relation("author")

    @staticmethod
    def test_predicate_is_ignored_by_equality():
        """Types compare equal regardless of their access predicate."""
        assert ResourceType(name="books", check_access=lambda params: None) == (
            ResourceType(name="books")
        )


class TestLoad:
    """Tests for attribute binding."""

    @staticmethod
    def test_binds_only_safe_attributes(registry, caplog):
        """Attributes outside the scenario's safe list are skipped."""
        node = ResourceNode(registry.get("books"))
        with caplog.at_level(logging.DEBUG, logger="roa.domain.resource"):
            assert node.load({"title": "Dune", "id": "99"}) is True

        assert node.attributes == {"title": "Dune"}
        assert "Skipping unsafe attribute 'id' for books" in caplog.text

    @staticmethod
    def test_empty_data_is_not_loaded(registry):
        """load() reports whether anything was offered."""
        assert ResourceNode(registry.get("books")).load({}) is False

    @staticmethod
    def test_scenario_widens_safe_attributes(registry):
        """The import scenario allows binding the id."""
        node = ResourceNode(registry.get("chapters"), scenario="import")
        node.load({"id": "9", "book_id": "5"})
        assert node.id == "9"

    @staticmethod
    def test_unknown_scenario_on_node(registry):
        """Creating a node with an unknown scenario fails early."""
        with pytest.raises(UnknownScenarioError):
            ResourceNode(registry.get("books"), scenario="bulk")


class TestValidate:
    """Tests for required-attribute validation."""

    @staticmethod
    def test_blank_required_attributes(registry):
        """None and empty strings count as blank."""
        node = ResourceNode(registry.get("chapters"), {"book_id": ""})
        assert node.validate() is False
        assert node.errors == {
            "book_id": ["book_id cannot be blank."],
            "title": ["title cannot be blank."],
        }
        assert node.has_errors()

    @staticmethod
    def test_validate_replaces_previous_errors(registry):
        """A successful validation clears earlier errors."""
        node = ResourceNode(registry.get("books"))
        node.validate()
        node.load({"title": "Dune"})
        assert node.validate() is True
        assert not node.has_errors()

    @staticmethod
    def test_add_error_accumulates(registry):
        """Several messages can be attached to one attribute."""
        node = ResourceNode(registry.get("books"))
        node.add_error("title", "too short")
        node.add_error("title", "taken")
        assert node.errors == {"title": ["too short", "taken"]}


class TestRelations:
    """Tests for the relation cache."""

    @staticmethod
    def test_get_relation_without_loader_is_none(registry):
        """Nodes without a loader cannot fetch relations."""
        node = ResourceNode(registry.get("chapters"), {"book_id": "5"})
        assert node.get_relation("book") is None
        assert node.is_relation_populated("book")

    @staticmethod
    def test_get_relation_fetches_and_caches(repository, registry):
        """The loader is asked once; later calls use the cache."""
        node = ResourceNode(
            registry.get("chapters"), {"book_id": "5"}, loader=repository
        )
        book = node.get_relation("book")
        repository.records.clear()

        assert book is not None
        assert book.attributes["title"] == "Dune"
        assert node.get_relation("book") is book

    @staticmethod
    def test_populate_relation_rejects_unknown_names(registry):
        """Only declared relations can be populated."""
        node = ResourceNode(registry.get("chapters"))
        with pytest.raises(UnknownRelationError):
            node.populate_relation("author", None)

    @staticmethod
    def test_get_relation_rejects_unknown_names(repository, registry):
        """Only declared relations can be fetched."""
        node = ResourceNode(registry.get("books"), loader=repository)
        with pytest.raises(UnknownRelationError):
            node.get_relation("publisher")


def test_repr_names_type_and_id(repository):
    """repr() shows the resource name and id."""
    assert repr(repository.get("books", 5)) == "ResourceNode('books', id='5')"


class TestRebindingForeignKeys:
    """Tests for cache invalidation when a foreign key changes."""

    @staticmethod
    def test_changed_parent_key_unresolves_slug(repository, registry):
        """A new parent key drops the cached parent and the resolved link."""
        chapter = repository.get("chapters", "2")
        repository.records[("books", "9")] = {"id": "9", "title": "Emma"}

        chapter.load({"book_id": "9"})

        assert not chapter.slug.is_resolved
        assert not chapter.is_relation_populated("book")
        chapter.slug.ensure(force=True)
        assert chapter.self_link == "/api/books/9/chapters/2"

    @staticmethod
    def test_same_parent_key_keeps_resolution(repository):
        """Rebinding the current value changes nothing."""
        chapter = repository.get("chapters", "2")
        parent = chapter.slug.parent

        chapter.load({"book_id": "5", "title": "Arrakis II"})

        assert chapter.slug.is_resolved
        assert chapter.slug.parent is parent

    @staticmethod
    def test_first_bind_does_not_unresolve(registry):
        """Setting a key that was absent keeps an already populated parent."""
        chapter = ResourceNode(registry.get("chapters"))
        chapter.populate_relation("book", ResourceNode(registry.get("books"), {"id": "5"}))
        chapter.slug.ensure()

        chapter.load({"book_id": "5"})

        assert chapter.self_link == "/api/books/5/chapters/"
