"""
Playground Helper Facades -- faker and lodash APIs over Faker and pydash
"""

import pytest

from playground.kernel.runtime import JSObject
from playground.library.fake import create_faker
from playground.library.lodash import lodash


class TestFaker:
    def test_same_seed_same_values(self):
        assert create_faker(1234).name.findName() == create_faker(1234).name.findName()

    def test_reseed(self):
        faker = create_faker(1)
        first = faker.lorem.sentence()
        faker.seed(1)
        assert faker.lorem.sentence() == first

    def test_namespaces_return_strings(self):
        faker = create_faker(7)
        assert isinstance(faker.name.firstName(), str)
        assert "@" in faker.internet.email()
        assert len(faker.lorem.words(2).split(" ")) == 2

    def test_random_number_range(self):
        faker = create_faker(7)
        values = {faker.random.number(JSObject(min=1, max=3)) for _ in range(20)}
        assert values <= {1, 2, 3}

    def test_flat_calls_map_to_providers(self):
        assert isinstance(create_faker(3).firstName(), str)

    def test_unknown_provider(self):
        with pytest.raises(AttributeError):
            create_faker(3).noSuchThing


class TestLodash:
    def test_camel_case_names(self):
        assert lodash.startCase("upcomingEvents") == "Upcoming Events"
        assert lodash.kebabCase("ButtonExample") == "button-example"

    def test_builtin_shadowing_names(self):
        assert lodash.map([1, 2], lambda x: x * 10) == [10, 20]

    def test_times(self):
        assert lodash.times(3, lambda i: i * 2) == [0, 2, 4]

    def test_chain(self):
        assert lodash([3, 1, 2]).sort_by().value() == [1, 2, 3]

    def test_unknown_name(self):
        with pytest.raises(AttributeError):
            lodash.notALodashFunction
