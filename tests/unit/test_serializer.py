from datetime import datetime
from decimal import Decimal

import pytest

from pagewindow.exceptions import PagerError
from pagewindow.serializer import DynamoSerializer


@pytest.fixture
def serializer():
    return DynamoSerializer()


class TestFromDynamo:
    def test_numbers_restored(self, serializer):
        item = {"age": {"N": "25"}, "score": {"N": "95.5"}}
        assert serializer.from_dynamo(item) == {"age": 25, "score": 95.5}

    def test_nested_values(self, serializer):
        item = {
            "tags": {"L": [{"S": "a"}, {"N": "1"}]},
            "meta": {"M": {"views": {"N": "10"}}},
            "ids": {"NS": ["1", "2"]},
        }
        assert serializer.from_dynamo(item) == {
            "tags": ["a", 1],
            "meta": {"views": 10},
            "ids": {1, 2},
        }


class TestToDynamoValue:
    def test_float_becomes_number(self, serializer):
        assert serializer.to_dynamo_value(10.5) == {"N": "10.5"}

    def test_datetime_becomes_string(self, serializer):
        value = serializer.to_dynamo_value(datetime(2023, 1, 1, 10, 0))
        assert value == {"S": "2023-01-01T10:00:00"}

    def test_decimal_passes_through(self, serializer):
        assert serializer.to_dynamo_value(Decimal("3")) == {"N": "3"}

    def test_unsupported_type_raises(self, serializer):
        with pytest.raises(PagerError, match="Failed to serialize"):
            serializer.to_dynamo_value(object())
