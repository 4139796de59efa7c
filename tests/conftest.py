"""Fixtures compartidas para las pruebas del listado de usuarios."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QCoreApplication

from usuarios_app.infrastructure.api_client import StaticAPIClient
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.models.user import Address, Company, User


def make_user(
    id: int,
    name: str,
    *,
    email: str = "",
    phone: str = "",
    username: str = "",
    website: str = "",
    city: str = "",
    company: str = "",
    street: str = "Calle 1",
    catch_phrase: str = "",
) -> User:
    return User(
        id=id,
        name=name,
        email=email or f"user{id}@x.com",
        phone=phone or f"000-{id:03d}",
        username=username or f"user{id}",
        website=website or f"user{id}.example",
        address=Address(street=street, suite="Apt. 1", city=city or "Ciudad", zipcode="00000"),
        company=Company(name=company or "Empresa", catch_phrase=catch_phrase, bs="bs"),
    )


class ManualRunner:
    """Runner que guarda los trabajos y los completa cuando la prueba lo pide."""

    def __init__(self) -> None:
        self.pending: list[tuple] = []

    def submit(self, job, on_success, on_failure) -> None:
        self.pending.append((job, on_success, on_failure))

    def complete(self, index: int = 0) -> None:
        job, on_success, on_failure = self.pending.pop(index)
        try:
            resultado = job()
        except Exception as exc:
            on_failure(exc)
            return
        on_success(resultado)

    def complete_all(self) -> None:
        while self.pending:
            self.complete()


class FakeFetcher:
    """Devuelve respuestas o lanza errores en el orden configurado."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    def fetch_users(self):
        self.calls += 1
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return list(outcome)


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def sample_users() -> list[User]:
    return UserRepository(StaticAPIClient()).fetch_users()


@pytest.fixture
def directory() -> list[User]:
    return [
        make_user(1, "Leanne Graham", email="Sincere@april.biz", phone="1-770-736-8031 x56442",
                  username="Bret", website="hildegard.org", city="Gwenborough",
                  company="Romaguera-Crona", street="Kulas Light"),
        make_user(2, "Ervin Howell", email="Shanna@melissa.tv", phone="010-692-6593 x09125",
                  username="Antonette", website="anastasia.net", city="Wisokyburgh",
                  company="Deckow-Crist", catch_phrase="Proactive didactic contingency"),
        make_user(3, "Clementine Bauch", email="Nathan@yesenia.net", phone="1-463-123-4447",
                  username="Samantha", website="ramiro.info", city="McKenziehaven",
                  company="Romaguera-Jacobson"),
        make_user(4, "Patricia Lebsack", email="Julianne.OConner@kory.org", phone="493-170-9623 x156",
                  username="Karianne", website="kale.biz", city="South Elvis",
                  company="Robel-Corkery"),
    ]


@pytest.fixture
def manual_runner() -> ManualRunner:
    return ManualRunner()
