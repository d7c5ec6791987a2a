"""End-to-end tests for `roa links`."""

from roa.domain.errors import AuthorizationError
from roa.entrypoints.cli.main import roa
from tests.fixtures.resources import deny, make_registry

# pylint: disable=unused-argument, magic-value-comparison

REGISTRY = "tests.fixtures.resources:REGISTRY"
BASE = ["--no-flight-recorder", "links"]


def link_lines(output: str) -> list[str]:
    """Return the tab-separated link lines of `output`."""
    return [line for line in output.splitlines() if "\t" in line]


def test_links_of_nested_record(runner, seeded_db_url):
    """Links are printed nearest-first as name<TAB>url lines."""
    result = runner.invoke(roa, BASE + ["pages", "7", "--registry", REGISTRY])
    assert result.exit_code == 0, result.output
    assert link_lines(result.stdout) == [
        "self\t/api/books/5/chapters/2/pages/7",
        "pages_list\t/api/books/5/chapters/2/pages",
        "parent_chapter\t/api/books/5/chapters/2",
        "chapters_list\t/api/books/5/chapters",
        "parent_book\t/api/books/5",
        "books_list\t/api/books",
    ]


def test_registry_from_environment(runner, seeded_db_url, monkeypatch):
    """ROA_REGISTRY can replace --registry."""
    monkeypatch.setenv("ROA_REGISTRY", REGISTRY)
    result = runner.invoke(roa, BASE + ["books", "5"])
    assert result.exit_code == 0
    assert link_lines(result.stdout) == ["self\t/api/books/5", "books_list\t/api/books"]


def test_missing_record_exits_2(runner, seeded_db_url):
    """Unknown records are reported with exit status 2."""
    result = runner.invoke(roa, BASE + ["chapters", "99", "--registry", REGISTRY])
    assert result.exit_code == 2
    assert "chapters (99) not found." in result.output


def test_unknown_resource_exits_2(runner, seeded_db_url):
    """Unregistered resource names are reported with exit status 2."""
    result = runner.invoke(roa, BASE + ["authors", "1", "--registry", REGISTRY])
    assert result.exit_code == 2
    assert "Unknown resource type 'authors'." in result.output


def test_bad_registry_reference(runner, seeded_db_url):
    """Malformed registry references are usage errors."""
    result = runner.invoke(roa, BASE + ["books", "5", "--registry", "nope"])
    assert result.exit_code == 2
    assert "Expected MODULE:ATTRIBUTE" in result.output


def test_denied_access_exits_3(runner, seeded_db_url, monkeypatch):
    """A denying ancestor predicate exits with status 3."""
    guarded = make_registry(book_access=deny("token rejected"))
    monkeypatch.setattr("tests.fixtures.resources.REGISTRY", guarded)
    result = runner.invoke(
        roa, BASE + ["pages", "7", "--registry", REGISTRY, "-p", "token=bad"]
    )
    assert result.exit_code == 3
    assert "Access denied: token rejected" in result.output


def test_params_keep_spaces_and_commas(runner, seeded_db_url, monkeypatch):
    """Each -p is one NAME=VALUE pair, passed to predicates verbatim."""
    seen = []

    def expect_exact_params(params):
        seen.append(dict(params))
        if dict(params) != {"title": "Dune Messiah", "tags": "a,b"}:
            raise AuthorizationError(f"unexpected params {dict(params)!r}")

    guarded = make_registry(book_access=expect_exact_params)
    monkeypatch.setattr("tests.fixtures.resources.REGISTRY", guarded)
    result = runner.invoke(
        roa,
        BASE
        + ["books", "5", "--registry", REGISTRY]
        + ["-p", "title=Dune Messiah", "-p", "tags=a,b"],
    )
    assert result.exit_code == 0, result.output
    assert seen == [{"title": "Dune Messiah", "tags": "a,b"}]
    assert link_lines(result.stdout) == ["self\t/api/books/5", "books_list\t/api/books"]


def test_param_without_equals_is_usage_error(runner, seeded_db_url):
    """A -p value lacking '=' is rejected before any lookup."""
    result = runner.invoke(
        roa, BASE + ["books", "5", "--registry", REGISTRY, "-p", "Dune Messiah"]
    )
    assert result.exit_code == 2
    assert "Expected NAME=VALUE" in result.output
