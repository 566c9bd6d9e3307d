import unittest
from registry_contracts.exceptions import TransactionFormattingError
from registry_contracts.utils.tx import (
    build_transaction,
    check_tx_formatting,
    format_dictionary,
    tx_hash_from_tx,
)


class TestBuildTransaction(unittest.TestCase):

    def test_shape(self):
        tx = build_transaction(sender="alice", contract="con_registry", function="set_value",
                               kwargs={"value": 1}, chain_id="test-chain")

        self.assertEqual(set(tx.keys()), {"metadata", "payload"})
        self.assertEqual(tx["payload"]["sender"], "alice")
        self.assertEqual(tx["payload"]["kwargs"], {"value": 1})
        self.assertEqual(tx["payload"]["chain_id"], "test-chain")
        self.assertEqual(len(tx["metadata"]["signature"]), 64)

    def test_same_payload_same_signature(self):
        a = build_transaction(sender="alice", contract="con_registry", function="set_value", kwargs={"value": 1})
        b = build_transaction(sender="alice", contract="con_registry", function="set_value", kwargs={"value": 1})
        c = build_transaction(sender="alice", contract="con_registry", function="set_value", kwargs={"value": 2})

        self.assertEqual(a["metadata"]["signature"], b["metadata"]["signature"])
        self.assertNotEqual(a["metadata"]["signature"], c["metadata"]["signature"])

    def test_built_transaction_passes_formatting(self):
        tx = build_transaction(sender="alice", contract="con_registry", function="set_value", kwargs={"value": 1})
        check_tx_formatting(tx)


class TestCheckTxFormatting(unittest.TestCase):

    def setUp(self):
        self.tx = build_transaction(sender="alice", contract="con_registry", function="set_value", kwargs={"value": 1})

    def test_missing_metadata(self):
        self.tx.pop("metadata")
        with self.assertRaises(TransactionFormattingError):
            check_tx_formatting(self.tx)

    def test_missing_sender(self):
        self.tx["payload"]["sender"] = ""
        with self.assertRaises(TransactionFormattingError):
            check_tx_formatting(self.tx)

    def test_badly_formatted_sender(self):
        self.tx["payload"]["sender"] = "not a sender"
        with self.assertRaises(TransactionFormattingError):
            check_tx_formatting(self.tx)

    def test_extra_payload_key(self):
        self.tx["payload"]["nonce"] = 1
        with self.assertRaises(TransactionFormattingError):
            check_tx_formatting(self.tx)

    def test_submission_requires_con_prefix(self):
        tx = build_transaction(sender="alice", contract="submission", function="submit_contract",
                               kwargs={"name": "registry", "code": "", "constructor_args": {}})
        with self.assertRaises(TransactionFormattingError):
            check_tx_formatting(tx)


class TestTxHash(unittest.TestCase):

    def test_hash_ignores_key_order(self):
        a = {"payload": {"sender": "alice", "contract": "con_registry"}, "metadata": {"signature": "00"}}
        b = {"metadata": {"signature": "00"}, "payload": {"contract": "con_registry", "sender": "alice"}}

        self.assertEqual(tx_hash_from_tx(a), tx_hash_from_tx(b))

    def test_format_dictionary_sorts_nested_keys(self):
        d = format_dictionary({"b": 1, "a": {"d": 2, "c": [{"f": 3, "e": 4}]}})

        self.assertEqual(list(d.keys()), ["a", "b"])
        self.assertEqual(list(d["a"].keys()), ["c", "d"])
        self.assertEqual(list(d["a"]["c"][0].keys()), ["e", "f"])

    def test_non_string_keys_rejected(self):
        with self.assertRaises(AssertionError):
            format_dictionary({1: "a"})


if __name__ == "__main__":
    unittest.main()
