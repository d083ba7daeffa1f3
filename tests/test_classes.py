"""Tests for the object and interaction class trees."""

from __future__ import annotations

import pytest
from lxml import etree

from fom_tools.errors import MissingRequiredFieldError, UnrecognizedValueError
from fom_tools.omt import Attribute, InteractionClass, ObjectClass, ObjectModel, Objects
from fom_tools.vocabulary import Order, Ownership, Sharing, UpdateType
from tests.fixture_loader import element

NESTED_OBJECTS = """
<objects>
  <objectClass>
    <name>Root</name><sharing>Neither</sharing>
    <attribute>
      <name>RootAttr</name><dataType>HLAtoken</dataType><updateType>Static</updateType>
      <ownership>NoTransfer</ownership><sharing>Neither</sharing>
      <transportation>HLAreliable</transportation><order>Receive</order>
    </attribute>
    <objectClass>
      <name>Child</name><sharing>Publish</sharing>
      <objectClass>
        <name>Grandchild</name><sharing>Subscribe</sharing>
        <attribute>
          <name>Deep</name><dataType>HLAinteger32BE</dataType><updateType>Periodic</updateType>
          <ownership>Divest</ownership><sharing>PublishSubscribe</sharing>
          <transportation>HLAbestEffort</transportation><order>TimeStamp</order>
        </attribute>
        <attribute>
          <name>Deeper</name><dataType>HLAoctet</dataType><updateType>NA</updateType>
          <ownership>Acquire</ownership><sharing>Publish</sharing>
          <transportation>HLAreliable</transportation><order>Receive</order>
        </attribute>
      </objectClass>
    </objectClass>
    <objectClass>
      <name>Sibling</name><sharing>PublishSubscribe</sharing>
    </objectClass>
  </objectClass>
</objects>
"""


def attribute_xml(dimensions: str = "") -> str:
    return f"""
    <attribute>
      <name>Position</name><dataType>Vector</dataType><updateType>Conditional</updateType>
      <updateCondition>On change</updateCondition>
      <ownership>DivestAcquire</ownership><sharing>PublishSubscribe</sharing>
      {dimensions}
      <transportation>HLAreliable</transportation><order>Receive</order>
      <semantics>Where it is.</semantics>
    </attribute>
    """


class TestObjectClassTree:
    """Tests for recursive object class conversion."""

    def test_nested_tree_pre_order(self) -> None:
        """Test that a depth-3 tree yields every node in pre-order."""
        objects = Objects.from_element(element(NESTED_OBJECTS), "objects")

        names = [node.name for node in objects.root.walk()]
        assert names == ["Root", "Child", "Grandchild", "Sibling"]

    def test_nodes_keep_their_attributes(self) -> None:
        root = Objects.from_element(element(NESTED_OBJECTS), "objects").root

        grandchild = root.find("Grandchild")
        assert grandchild is not None
        assert grandchild.sharing is Sharing.SUBSCRIBE
        assert [a.name for a in grandchild.attributes] == ["Deep", "Deeper"]
        assert grandchild.attributes[0].order is Order.TIME_STAMP
        assert grandchild.object_classes is None

        assert [a.name for a in root.attributes] == ["RootAttr"]
        assert root.find("Child").attributes is None

    def test_find_missing(self) -> None:
        root = Objects.from_element(element(NESTED_OBJECTS), "objects").root
        assert root.find("Nope") is None

    def test_children(self) -> None:
        root = Objects.from_element(element(NESTED_OBJECTS), "objects").root
        assert [c.name for c in root.children] == ["Child", "Sibling"]
        assert root.find("Sibling").children == ()

    def test_deep_nesting(self) -> None:
        """Test a tree deeper than any real model."""
        depth = 50
        xml = "<objects>"
        for level in range(depth):
            xml += f"<objectClass><name>C{level}</name><sharing>Neither</sharing>"
        xml += "</objectClass>" * depth + "</objects>"

        root = Objects.from_element(element(xml), "objects").root
        assert [node.name for node in root.walk()] == [f"C{level}" for level in range(depth)]

    def test_depth_beyond_call_stack(self) -> None:
        """Test a tree deeper than the interpreter recursion limit."""
        objects = etree.Element("objects")
        parent = objects
        for level in range(2000):
            parent = etree.SubElement(parent, "objectClass")
            etree.SubElement(parent, "name").text = f"C{level}"
            etree.SubElement(parent, "sharing").text = "Neither"

        root = Objects.from_element(objects, "objects").root

        nodes = list(root.walk())
        assert len(nodes) == 2000
        assert nodes[-1].name == "C1999"
        assert nodes[-1].object_classes is None

    def test_parent_error_before_child_error(self) -> None:
        xml = NESTED_OBJECTS.replace("<name>Grandchild</name>", "").replace(
            "<name>RootAttr</name>", ""
        )
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Objects.from_element(element(xml), "objects")
        assert exc_info.value.path == "objects.objectClass.attribute.name"

    def test_missing_nested_name_path(self) -> None:
        xml = NESTED_OBJECTS.replace("<name>Grandchild</name>", "")
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Objects.from_element(element(xml), "objects")
        assert exc_info.value.path == "objects.objectClass.objectClass.objectClass.name"

    def test_missing_root_class(self) -> None:
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Objects.from_element(element("<objects/>"), "objects")
        assert exc_info.value.path == "objects.objectClass"

    def test_unknown_sharing(self) -> None:
        xml = NESTED_OBJECTS.replace("<sharing>Publish</sharing>", "<sharing>Both</sharing>", 1)
        with pytest.raises(UnrecognizedValueError) as exc_info:
            Objects.from_element(element(xml), "objects")
        assert exc_info.value.path == "objects.objectClass.objectClass.sharing"
        assert exc_info.value.value == "Both"


class TestAttribute:
    """Tests for attribute conversion."""

    def test_all_fields(self) -> None:
        xml = attribute_xml("<dimensions><dimension>A</dimension><dimension>B</dimension></dimensions>")
        attribute = Attribute.from_element(element(xml), "objects.objectClass.attribute")

        assert attribute == Attribute(
            name="Position",
            data_type="Vector",
            update_type=UpdateType.CONDITIONAL,
            ownership=Ownership.DIVEST_ACQUIRE,
            sharing=Sharing.PUBLISH_SUBSCRIBE,
            transportation="HLAreliable",
            order=Order.RECEIVE,
            update_condition="On change",
            dimensions=("A", "B"),
            semantics="Where it is.",
        )

    def test_dimensions_absent(self) -> None:
        attribute = Attribute.from_element(element(attribute_xml()), "a")
        assert attribute.dimensions is None

    def test_dimensions_present_but_empty(self) -> None:
        attribute = Attribute.from_element(element(attribute_xml("<dimensions/>")), "a")
        assert attribute.dimensions == ()

    def test_missing_order(self) -> None:
        xml = attribute_xml().replace("<order>Receive</order>", "")
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            Attribute.from_element(element(xml), "objects.objectClass.attribute")
        assert exc_info.value.path == "objects.objectClass.attribute.order"

    def test_unknown_update_type(self) -> None:
        xml = attribute_xml().replace("Conditional", "Sometimes")
        with pytest.raises(UnrecognizedValueError):
            Attribute.from_element(element(xml), "a")


class TestInteractionClassTree:
    """Tests for recursive interaction class conversion."""

    def test_sample_interactions(self, sample_model: ObjectModel) -> None:
        root = sample_model.interactions.root

        assert [node.name for node in root.walk()] == ["HLAinteractionRoot", "WeaponFire", "Collision"]
        assert root.parameters is None
        assert root.dimensions is None

        weapon_fire = root.find("WeaponFire")
        assert isinstance(weapon_fire, InteractionClass)
        assert weapon_fire.order is Order.TIME_STAMP
        assert weapon_fire.dimensions == ("FederateDimension",)
        assert [p.name for p in weapon_fire.parameters] == ["FiringObjectIdentifier", "MunitionType"]
        assert weapon_fire.parameters[0].semantics is None
        assert weapon_fire.parameters[1].semantics == "The type of munition fired."

    def test_missing_transportation(self) -> None:
        xml = """
        <interactionClass>
          <name>Root</name><sharing>Neither</sharing><order>Receive</order>
        </interactionClass>
        """
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            InteractionClass.from_element(element(xml), "interactions.interactionClass")
        assert exc_info.value.path == "interactions.interactionClass.transportation"

    def test_missing_parameter_data_type(self) -> None:
        xml = """
        <interactionClass>
          <name>Root</name><sharing>Neither</sharing>
          <transportation>HLAreliable</transportation><order>Receive</order>
          <parameter><name>P</name></parameter>
        </interactionClass>
        """
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            InteractionClass.from_element(element(xml), "interactions.interactionClass")
        assert exc_info.value.path == "interactions.interactionClass.parameter.dataType"


class TestSampleObjects:
    """Tests for the object classes of the sample document."""

    def test_pre_order(self, sample_model: ObjectModel) -> None:
        names = [node.name for node in sample_model.objects.root.walk()]
        assert names == ["HLAobjectRoot", "BaseEntity", "PhysicalEntity", "EmbeddedSystem"]

    def test_attribute_dimensions(self, sample_model: ObjectModel) -> None:
        root = sample_model.objects.root
        base = root.find("BaseEntity")
        entity_type, world_location = base.attributes

        assert root.attributes[0].dimensions is None
        assert entity_type.dimensions == ()
        assert world_location.dimensions == ("FederateDimension",)
        assert world_location.update_condition == "On change"

    def test_dangling_data_type_reference_kept(self, sample_model: ObjectModel) -> None:
        """Data type names are not resolved against the catalogs."""
        base = sample_model.objects.root.find("BaseEntity")
        assert base.attributes[0].data_type == "EntityTypeStruct"
        assert "EntityTypeStruct" not in sample_model.data_types.names()

    def test_object_class_type(self, sample_model: ObjectModel) -> None:
        assert all(isinstance(node, ObjectClass) for node in sample_model.objects.root.walk())
