"""Tests for the pose document schema."""

from __future__ import annotations

import json

from pydantic import ValidationError
import pytest

from posesandbox.core.poses import InvalidPoseError, PoseDocument, PropDescriptor


class TestParse:
    """Tests for lenient document parsing."""

    def test_parse_full_document(self):
        """Test all wire fields are read, including camelCase savedAt."""
        doc = PoseDocument.parse(
            {
                "version": 1,
                "notes": "hello",
                "joints": {"hips": [0, 0, 0, 1]},
                "props": [
                    {
                        "type": "cube",
                        "name": "Box",
                        "position": [1, 2, 3],
                        "quaternion": [0, 0, 0, 1],
                        "scale": [1, 1, 1],
                    }
                ],
                "savedAt": "2026-01-01T00:00:00+00:00",
            }
        )

        assert doc.version == 1
        assert doc.notes == "hello"
        assert doc.joints == {"hips": (0.0, 0.0, 0.0, 1.0)}
        assert doc.props is not None and len(doc.props) == 1
        assert doc.props[0].position == (1.0, 2.0, 3.0)
        assert doc.saved_at == "2026-01-01T00:00:00+00:00"

    @pytest.mark.parametrize("data", [None, 42, "pose", [1, 2, 3]])
    def test_non_mapping_raises_invalid_pose(self, data):
        """Test non-object values are rejected."""
        with pytest.raises(InvalidPoseError):
            PoseDocument.parse(data)

    def test_parse_returns_same_document_instance(self):
        """Test parsing an existing document is a no-op."""
        doc = PoseDocument(joints={})
        assert PoseDocument.parse(doc) is doc

    def test_missing_sections_are_none(self):
        """Test absent joints/props parse as None (leave world alone)."""
        doc = PoseDocument.parse({})

        assert doc.joints is None
        assert doc.props is None
        assert doc.notes is None
        assert doc.version == 1

    def test_non_mapping_joints_treated_as_absent(self):
        doc = PoseDocument.parse({"joints": [1, 2, 3]})
        assert doc.joints is None

    def test_wrong_length_quaternion_is_kept_but_not_applicable(self):
        """Test a length-3 entry survives parsing but yields no quaternion."""
        doc = PoseDocument.parse({"joints": {"head": [1, 2, 3]}})

        assert doc.joints == {"head": (1.0, 2.0, 3.0)}
        assert doc.quaternion_for("head") is None

    def test_non_numeric_joint_entries_dropped(self):
        doc = PoseDocument.parse(
            {"joints": {"head": "up", "neck": [0, "a", 0, 1], "hips": [0, 0, 0, 1]}}
        )
        assert doc.joints == {"hips": (0.0, 0.0, 0.0, 1.0)}

    def test_non_string_notes_treated_as_absent(self):
        doc = PoseDocument.parse({"notes": 12})
        assert doc.notes is None

    def test_null_prop_entry_becomes_empty_descriptor(self):
        """Test null prop entries still rebuild as a default prop."""
        doc = PoseDocument.parse({"props": [None]})

        assert doc.props == (PropDescriptor(),)
        assert doc.props[0].resolved_type == "cube"

    @pytest.mark.parametrize(
        "prop",
        [
            {"type": "cube", "quaternion": [0, 0, 1]},
            {"type": "cube", "position": [1, 2]},
            {"type": "cube", "position": [1, 2, 3, 4]},
            {"type": "cube", "scale": "big"},
            {"type": "cube", "position": "abc", "quaternion": [0, "x", 0, 1]},
        ],
    )
    def test_malformed_prop_transform_component_dropped(self, prop: dict):
        """Test a bad transform component is discarded, not the document."""
        doc = PoseDocument.parse({"joints": {"head": [0, 0, 0, 1]}, "props": [prop]})

        assert doc.props is not None
        descriptor = doc.props[0]
        assert descriptor.type == "cube"
        for field in ("position", "quaternion", "scale"):
            if field in prop:
                assert getattr(descriptor, field) is None
        assert doc.quaternion_for("head") == (0.0, 0.0, 0.0, 1.0)

    def test_well_formed_components_kept_beside_malformed_one(self):
        doc = PoseDocument.parse(
            {"props": [{"position": [1, 2, 3], "quaternion": [0, 0, 1], "scale": [2, 2, 2]}]}
        )

        assert doc.props is not None
        assert doc.props[0].position == (1.0, 2.0, 3.0)
        assert doc.props[0].quaternion is None
        assert doc.props[0].scale == (2.0, 2.0, 2.0)

    def test_uncoercible_saved_at_raises_invalid_pose(self):
        with pytest.raises(InvalidPoseError):
            PoseDocument.parse({"savedAt": ["not", "a", "timestamp"]})

    def test_unknown_fields_ignored(self):
        doc = PoseDocument.parse({"joints": {}, "thumbnail": "data:image/png;base64,..."})
        assert doc.joints == {}

    def test_parse_json_invalid_text_raises_decode_error(self):
        with pytest.raises(json.JSONDecodeError):
            PoseDocument.parse_json("{not json")


class TestImmutability:
    """Tests for document immutability."""

    def test_document_is_frozen(self):
        doc = PoseDocument(joints={"hips": (0.0, 0.0, 0.0, 1.0)})
        with pytest.raises(ValidationError):
            doc.notes = "changed"  # type: ignore[misc]

    def test_descriptor_is_frozen(self):
        prop = PropDescriptor(type="cube")
        with pytest.raises(ValidationError):
            prop.type = "sphere"  # type: ignore[misc]


class TestPropDescriptor:
    """Tests for prop descriptor type resolution."""

    def test_resolved_type_trims_and_lowercases(self):
        assert PropDescriptor(type="  Sphere ").resolved_type == "sphere"

    def test_resolved_type_infers_from_name_when_blank(self):
        assert PropDescriptor(type="   ", name="Big_Torus").resolved_type == "torus"

    def test_unknown_type_passes_through(self):
        assert PropDescriptor(type="Teapot").resolved_type == "teapot"

    def test_numeric_type_is_stringified(self):
        assert PropDescriptor.model_validate({"type": 7}).type == "7"


class TestDump:
    """Tests for wire-format output."""

    def test_to_dict_uses_wire_names_and_lists(self):
        doc = PoseDocument(
            notes="n",
            joints={"hips": (0.0, 0.0, 0.0, 1.0)},
            props=[PropDescriptor(type="cube", name="", position=(1.0, 2.0, 3.0))],
            saved_at="2026-01-01T00:00:00+00:00",
        )

        data = doc.to_dict()

        assert data["savedAt"] == "2026-01-01T00:00:00+00:00"
        assert "saved_at" not in data
        assert data["joints"]["hips"] == [0.0, 0.0, 0.0, 1.0]
        assert data["props"][0]["position"] == [1.0, 2.0, 3.0]

    def test_to_json_parses_back_to_equal_document(self):
        doc = PoseDocument(
            notes="round trip",
            joints={"head": (0.0, 0.5, 0.0, 0.8660254)},
            props=[PropDescriptor(type="cone", name="Hat", scale=(1.0, 2.0, 1.0))],
            saved_at="2026-01-01T00:00:00+00:00",
        )

        assert PoseDocument.parse_json(doc.to_json()) == doc
