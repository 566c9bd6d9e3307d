import unittest
from parameterized import parameterized
from registry_contracts.formatting import (
    identity_is_formatted,
    contract_name_is_formatted,
    kwargs_are_formatted,
    number_is_formatted,
    integer_is_formatted,
    hex_is_formatted,
)


class TestIdentityFormatting(unittest.TestCase):

    @parameterized.expand([
        ("account_name", "alice", True),
        ("system_account", "sys", True),
        ("verifying_key", "e9e8aad29ce8e94fd77d9c55582e5e0c57cf81c552ba61c0d4e34b0dc11fd931", True),
        ("empty", "", False),
        ("leading_digit_short", "1abc", False),
        ("contains_space", "al ice", False),
        ("too_long", "a" * 65, False),
        ("not_a_string", 42, False),
        ("none", None, False),
    ])
    def test_identity_is_formatted(self, name, identity, expected):
        self.assertEqual(identity_is_formatted(identity), expected)


class TestContractNameFormatting(unittest.TestCase):

    @parameterized.expand([
        ("prefixed", "con_controlled_registry", True),
        ("missing_prefix", "controlled_registry", False),
        ("upper_case", "con_Registry", False),
        ("too_long", "con_" + "a" * 61, False),
        ("none", None, False),
    ])
    def test_contract_name_is_formatted(self, name, contract_name, expected):
        self.assertEqual(contract_name_is_formatted(contract_name), expected)


class TestValueFormatting(unittest.TestCase):

    def test_kwargs_must_be_identifiers(self):
        self.assertTrue(kwargs_are_formatted({"new_value": 1, "address": "alice"}))
        self.assertFalse(kwargs_are_formatted({"new value": 1}))

    def test_number_is_non_negative_int(self):
        self.assertTrue(number_is_formatted(0))
        self.assertFalse(number_is_formatted(-1))
        self.assertFalse(number_is_formatted(1.5))

    def test_integer_rejects_bool_and_float(self):
        self.assertTrue(integer_is_formatted(-7))
        self.assertFalse(integer_is_formatted(True))
        self.assertFalse(integer_is_formatted(7.0))
        self.assertFalse(integer_is_formatted("7"))

    def test_hex_is_formatted(self):
        self.assertTrue(hex_is_formatted("abcd"))
        self.assertFalse(hex_is_formatted("abc"))
        self.assertFalse(hex_is_formatted("xyz0"))
        self.assertFalse(hex_is_formatted(None))


if __name__ == "__main__":
    unittest.main()
