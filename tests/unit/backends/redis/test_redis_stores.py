##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Tests for the `structstash/backends/redis/redis_stores.py` module.
"""

import pytest

from structstash.backends.redis.redis_stores import (
    JSON_FIELD,
    RawJSONDecoder,
    RedisFlatStore,
    RedisHashJSONStore,
    RedisJSONStore,
)
from structstash.data_models import DetailModel
from structstash.exceptions import ConditionalWriteError, RecordEncodingError, RecordNotFoundError
from tests.fixture_types import FixtureDict, FixtureRedis


class TestRedisFlatStore:
    """Tests for the RedisFlatStore class."""

    def test_save_writes_single_hset(self, mock_redis: FixtureRedis, test_records: FixtureDict):
        """
        Test that saving flattens the record into one `HSET` with a mapping.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            test_records: A fixture providing test records.
        """
        record = test_records["john"]
        store = RedisFlatStore(mock_redis)

        store.save("JohnDoeHash", record)

        mock_redis.hset.assert_called_once_with(
            "JohnDoeHash", mapping={"info": str(record.info), "rank": "1"}
        )

    def test_save_rejects_other_types(self, mock_redis: FixtureRedis):
        """
        Test that only records can be written.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
        """
        store = RedisFlatStore(mock_redis)

        with pytest.raises(TypeError, match="writes RecordModel objects"):
            store.save("key", DetailModel(first_name="John"))
        mock_redis.hset.assert_not_called()

    def test_retrieve_returns_raw_mapping(self, mock_redis: FixtureRedis):
        """
        Test that the hash comes back untouched.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
        """
        raw = {"info": "DetailModel(first_name='John', last_name='Doe', major='CSE')", "rank": "1"}
        mock_redis.exists.return_value = 1
        mock_redis.hgetall.return_value = raw
        store = RedisFlatStore(mock_redis)

        assert store.retrieve("JohnDoeHash") == raw
        mock_redis.hgetall.assert_called_once_with("JohnDoeHash")

    def test_retrieve_missing_key(self, mock_redis: FixtureRedis):
        """
        Test that reading a missing hash raises a `RecordNotFoundError`.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
        """
        mock_redis.exists.return_value = 0
        store = RedisFlatStore(mock_redis)

        with pytest.raises(RecordNotFoundError, match="does not exist"):
            store.retrieve("missing")
        mock_redis.hgetall.assert_not_called()


class TestRedisHashJSONStore:
    """Tests for the RedisHashJSONStore class."""

    def test_save_writes_json_field(self, mock_redis: FixtureRedis, test_records: FixtureDict):
        """
        Test that the record is stored as JSON text in the `JSON` field.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            test_records: A fixture providing test records.
        """
        store = RedisHashJSONStore(mock_redis)

        store.save("JohnDoeHashJSON", test_records["john"])

        mock_redis.hset.assert_called_once_with(
            "JohnDoeHashJSON",
            JSON_FIELD,
            '{"info":{"FirstName":"John","LastName":"Doe","Major":"CSE"},"rank":1}',
        )

    def test_save_encoding_failure_skips_store(self, mock_redis: FixtureRedis, test_records: FixtureDict):
        """
        Test that an encoding failure is raised before Redis is touched.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            test_records: A fixture providing test records.
        """
        record = test_records["john"]
        record.info.major = object()
        store = RedisHashJSONStore(mock_redis)

        with pytest.raises(RecordEncodingError):
            store.save("JohnDoeHashJSON", record)
        mock_redis.hset.assert_not_called()

    def test_retrieve_returns_json_text(self, mock_redis: FixtureRedis):
        """
        Test that the JSON text is returned undecoded.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
        """
        mock_redis.hget.return_value = '{"rank":1}'
        store = RedisHashJSONStore(mock_redis)

        assert store.retrieve("key") == '{"rank":1}'
        mock_redis.hget.assert_called_once_with("key", JSON_FIELD)

    def test_retrieve_missing_field(self, mock_redis: FixtureRedis):
        """
        Test that a missing `JSON` field raises a `RecordNotFoundError`.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
        """
        mock_redis.hget.return_value = None
        store = RedisHashJSONStore(mock_redis)

        with pytest.raises(RecordNotFoundError, match="has no 'JSON' field"):
            store.retrieve("key")


class TestRedisJSONStore:
    """Tests for the RedisJSONStore class."""

    @pytest.fixture
    def json_commands(self, mock_redis: FixtureRedis):
        """
        The mocked JSON command group of the client.

        Args:
            mock_redis: A fixture providing a mocked Redis client.

        Returns:
            The mock returned by `client.json()`.
        """
        mock_redis.json.return_value.set.return_value = True
        return mock_redis.json.return_value

    def test_json_commands_use_raw_decoder(self, mock_redis: FixtureRedis, json_commands):
        """
        Test that the JSON command group is requested with the pass-through decoder.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
        """
        json_commands.get.return_value = '{"rank":1}'
        RedisJSONStore(mock_redis).retrieve("key")

        decoder = mock_redis.json.call_args.kwargs["decoder"]
        assert isinstance(decoder, RawJSONDecoder)
        assert decoder.decode('"CSE"') == '"CSE"'

    def test_save_sets_root_document(self, mock_redis: FixtureRedis, json_commands, test_records: FixtureDict):
        """
        Test that the record is written at the root path without conditions by default.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
            test_records: A fixture providing test records.
        """
        record = test_records["john"]

        RedisJSONStore(mock_redis).save("JohnDoeJSON", record)

        json_commands.set.assert_called_once_with("JohnDoeJSON", ".", record.to_dict(), nx=False, xx=False)

    @pytest.mark.parametrize("condition", ["nx", "xx"])
    def test_save_conditional_refused(
        self, mock_redis: FixtureRedis, json_commands, test_records: FixtureDict, condition: str
    ):
        """
        Test that a refused conditional write raises a `ConditionalWriteError`.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
            test_records: A fixture providing test records.
            condition: The condition that isn't met.
        """
        json_commands.set.return_value = None

        with pytest.raises(ConditionalWriteError, match="was not written"):
            RedisJSONStore(mock_redis).save("JohnDoeJSON", test_records["john"], **{condition: True})

    def test_save_conditional_accepted(self, mock_redis: FixtureRedis, json_commands, test_records: FixtureDict):
        """
        Test that a conditional write that holds passes its flag through.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
            test_records: A fixture providing test records.
        """
        record = test_records["john"]

        RedisJSONStore(mock_redis).save("JohnDoeJSON", record, nx=True)

        json_commands.set.assert_called_once_with("JohnDoeJSON", ".", record.to_dict(), nx=True, xx=False)

    def test_save_both_conditions(self, mock_redis: FixtureRedis, json_commands, test_records: FixtureDict):
        """
        Test that asking for both conditions at once is rejected before Redis is touched.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
            test_records: A fixture providing test records.
        """
        with pytest.raises(ValueError, match="Only one of"):
            RedisJSONStore(mock_redis).save("JohnDoeJSON", test_records["john"], nx=True, xx=True)
        json_commands.set.assert_not_called()

    def test_save_encoding_failure(self, mock_redis: FixtureRedis, json_commands, test_records: FixtureDict):
        """
        Test that the encoder's `TypeError` surfaces as a `RecordEncodingError`.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
            test_records: A fixture providing test records.
        """
        json_commands.set.side_effect = TypeError("Object of type object is not JSON serializable")

        with pytest.raises(RecordEncodingError, match="Unable to encode"):
            RedisJSONStore(mock_redis).save("JohnDoeJSON", test_records["john"])

    def test_save_path(self, mock_redis: FixtureRedis, json_commands):
        """
        Test that writing a sub-path only sends that path and value.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
        """
        RedisJSONStore(mock_redis).save_path("JohnDoeJSON", "info.Major", "EEE", xx=True)

        json_commands.set.assert_called_once_with("JohnDoeJSON", ".info.Major", "EEE", nx=False, xx=True)

    @pytest.mark.parametrize("path, expected_path", [("", "."), (".", "."), ("info.Major", ".info.Major")])
    def test_retrieve_path(self, mock_redis: FixtureRedis, json_commands, path: str, expected_path: str):
        """
        Test that reads are sent with the normalised path and the raw text is returned.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
            path: The path asked for.
            expected_path: The path sent to Redis.
        """
        json_commands.get.return_value = '"CSE"'

        assert RedisJSONStore(mock_redis).retrieve("JohnDoeJSON", path=path) == '"CSE"'
        json_commands.get.assert_called_once_with("JohnDoeJSON", expected_path)

    def test_retrieve_missing_key(self, mock_redis: FixtureRedis, json_commands):
        """
        Test that a missing document raises a `RecordNotFoundError`.

        Args:
            mock_redis: A fixture providing a mocked Redis client.
            json_commands: The mocked JSON command group.
        """
        json_commands.get.return_value = None

        with pytest.raises(RecordNotFoundError, match="does not hold a JSON document"):
            RedisJSONStore(mock_redis).retrieve("missing")
