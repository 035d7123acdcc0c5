"""Unit tests for snapshot bitfield encoding and dictionary form."""

import pytest

from hull.formats.snapshot import (
    MalformedSnapshotError,
    Snapshot,
    decode_bitfield,
    encode_bitfield,
)


def test_encode_bitfield():
    assert encode_bitfield([True, False, False, True]) == "1001"
    assert encode_bitfield([]) == ""


def test_decode_treats_anything_but_one_as_unset():
    assert decode_bitfield("10x1 ") == [True, False, False, True, False]


def test_is_complete():
    assert Snapshot(2, 3, "010101").is_complete
    assert not Snapshot(2, 3, "0101").is_complete


class TestDictForm:
    """Tests for to_dict / from_dict."""

    def test_to_dict(self):
        data = Snapshot(2, 2, "1001", (1, 0)).to_dict()
        assert data == {"width": 2, "height": 2, "cells": "1001", "seed": {"x": 1, "y": 0}}

    def test_to_dict_without_seed(self):
        assert Snapshot(1, 1, "0").to_dict()["seed"] is None

    def test_from_dict(self):
        snapshot = Snapshot.from_dict({"width": 2, "height": 1, "cells": "10", "seed": {"x": 0, "y": 0}})
        assert snapshot == Snapshot(2, 1, "10", (0, 0))

    def test_from_dict_accepts_boolean_list(self):
        snapshot = Snapshot.from_dict({"width": 3, "height": 1, "cells": [True, False, True]})
        assert snapshot.cells == "101"
        assert snapshot.seed is None

    def test_from_dict_accepts_character_list(self):
        snapshot = Snapshot.from_dict({"width": 3, "height": 1, "cells": ["0", "1", "0"]})
        assert snapshot.cells == "010"

    def test_from_dict_rejects_unknown_list_entries(self):
        with pytest.raises(MalformedSnapshotError, match="invalid cell flag"):
            Snapshot.from_dict({"cells": ["1", "yes", "0"]})

    def test_seed_errors_are_chained(self):
        with pytest.raises(MalformedSnapshotError) as excinfo:
            Snapshot.from_dict({"cells": "01", "seed": {"x": 1}})
        assert isinstance(excinfo.value.__cause__, KeyError)

    def test_from_dict_without_dimensions(self):
        snapshot = Snapshot.from_dict({"cells": "11"})
        assert (snapshot.width, snapshot.height) == (0, 0)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "0101",
            {"cells": 42},
            {"cells": "01", "width": "2", "height": 1},
            {"cells": "01", "seed": {"x": 1}},
            {"cells": "01", "seed": [0, 1]},
            {"cells": "01", "seed": {"x": "a", "y": 0}},
            {"cells": "01", "seed": {"x": 1.7, "y": 0}},
            {"cells": "01", "seed": {"x": 0, "y": True}},
            {"cells": [1, 0]},
        ],
    )
    def test_from_dict_malformed(self, data):
        with pytest.raises(MalformedSnapshotError):
            Snapshot.from_dict(data)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError, match="Malformed snapshot"):
            Snapshot.from_dict({"cells": None})
