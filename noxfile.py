import nox

nox.options.sessions = ["tests"]

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

DOMAIN_TEST_DIRS = ["tests/catalogue/domain/", "tests/ordering/domain/"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the whole storefront suite."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Aggregates, value objects and money only; no FastAPI, no sessions."""
    session.install("-e", ".[test]")
    session.run("pytest", *DOMAIN_TEST_DIRS, *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_bdd(session: nox.Session) -> None:
    """Cart, checkout and menu scenarios."""
    session.install("-e", ".[test]")
    session.run("pytest", "tests/ordering/bdd/", "tests/catalogue/bdd/", *session.posargs)
