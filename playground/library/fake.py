"""
Fake-data helper exposed to examples as FAKER.

Examples call the namespaced API they were written against
(`faker.name.firstName()`, `faker.lorem.sentence()`); each call is served by
a Faker instance the registry seeds once per run, so a given example always
renders the same markup.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pydash
from faker import Faker

from playground.kernel.runtime import is_nullish, to_number, undefined


def _count(value: Any, fallback: int) -> int:
    if is_nullish(value):
        return fallback
    return int(to_number(value))


def _number_range(options: Any, *_: Any) -> tuple[int, int]:
    if isinstance(options, dict):
        return _count(options.get("min", undefined), 0), _count(options.get("max", undefined), 99999)
    return 0, _count(options, 99999)


class FakerFacade:
    """Namespaced fake-data API over one faker.Faker instance."""

    def __init__(self, fake: Faker) -> None:
        self._fake = fake

        self.name = SimpleNamespace(
            firstName=lambda *_: fake.first_name(),
            lastName=lambda *_: fake.last_name(),
            findName=lambda *_: fake.name(),
            jobTitle=lambda *_: fake.job(),
            prefix=lambda *_: fake.prefix(),
            suffix=lambda *_: fake.suffix(),
        )
        self.lorem = SimpleNamespace(
            word=lambda *_: fake.word(),
            words=lambda n=undefined, *_: " ".join(fake.words(nb=_count(n, 3))),
            sentence=lambda n=undefined, *_: fake.sentence(nb_words=_count(n, 6)),
            sentences=lambda n=undefined, *_: " ".join(fake.sentences(nb=_count(n, 3))),
            paragraph=lambda n=undefined, *_: fake.paragraph(nb_sentences=_count(n, 3)),
            paragraphs=lambda n=undefined, *_: "\n \r".join(fake.paragraphs(nb=_count(n, 3))),
            text=lambda *_: fake.text(),
        )
        self.internet = SimpleNamespace(
            email=lambda *_: fake.email(),
            userName=lambda *_: fake.user_name(),
            url=lambda *_: fake.url(),
            domainName=lambda *_: fake.domain_name(),
            ip=lambda *_: fake.ipv4(),
            avatar=lambda *_: fake.image_url(width=128, height=128),
        )
        self.image = SimpleNamespace(
            avatar=lambda *_: fake.image_url(width=128, height=128),
            imageUrl=lambda width=undefined, height=undefined, *_: fake.image_url(
                width=_count(width, 640), height=_count(height, 480)
            ),
        )
        self.address = SimpleNamespace(
            city=lambda *_: fake.city(),
            country=lambda *_: fake.country(),
            state=lambda *_: fake.state(),
            streetAddress=lambda *_: fake.street_address(),
            zipCode=lambda *_: fake.postcode(),
        )
        self.company = SimpleNamespace(
            companyName=lambda *_: fake.company(),
            catchPhrase=lambda *_: fake.catch_phrase(),
            bs=lambda *_: fake.bs(),
        )
        self.commerce = SimpleNamespace(
            productName=lambda *_: fake.catch_phrase(),
            department=lambda *_: fake.word().title(),
            price=lambda *_: f"{fake.pyfloat(min_value=1, max_value=1000, right_digits=2):.2f}",
        )
        self.phone = SimpleNamespace(phoneNumber=lambda *_: fake.phone_number())
        self.date = SimpleNamespace(
            month=lambda *_: fake.month_name(),
            weekday=lambda *_: fake.day_of_week(),
            past=lambda *_: fake.past_date().isoformat(),
            future=lambda *_: fake.future_date().isoformat(),
        )
        self.random = SimpleNamespace(
            number=lambda options=undefined, *_: fake.random_int(*_number_range(options)),
            boolean=lambda *_: fake.pybool(),
            uuid=lambda *_: fake.uuid4(),
            word=lambda *_: fake.word(),
            arrayElement=lambda items=undefined, *_: fake.random_element(elements=list(items)),
        )

    def seed(self, value: Any, *_: Any) -> Any:
        self._fake.seed_instance(int(to_number(value)))
        return undefined

    def __getattr__(self, name: str) -> Any:
        # Flat camelCase calls map onto faker's snake_case providers
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._fake, pydash.snake_case(name))


def create_faker(seed: int | None = None) -> FakerFacade:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return FakerFacade(fake)
