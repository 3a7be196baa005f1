"""Tests for the FBA action catalog."""
import pytest
from datetime import datetime

from mwsfba.api import fba
from mwsfba.builder.complex_list import ComplexList
from mwsfba.errors import InvalidEnumValueError, MissingRequiredFieldError, UnknownActionError
from mwsfba.schema.models import ParamKind


class TestCatalog:
    """Test catalog lookups."""

    def test_sections(self):
        """Test every section is present."""
        assert sorted(fba.CATALOG) == ["inbound", "inventory", "outbound"]

    def test_list_actions(self):
        """Test listing a single section."""
        actions = fba.list_actions("inventory")
        assert actions == [
            ("inventory", "GetServiceStatus"),
            ("inventory", "ListInventorySupply"),
            ("inventory", "ListInventorySupplyByNextToken"),
        ]

    def test_list_all_actions(self):
        """Test the whole catalog is listed."""
        assert len(fba.list_actions()) == 21

    def test_unknown_action(self):
        """Test unknown actions raise."""
        with pytest.raises(UnknownActionError):
            fba.get_schema("inbound", "DeleteEverything")

        with pytest.raises(UnknownActionError):
            fba.list_actions("returns")

    def test_group_metadata(self):
        """Test path and version per group."""
        schema = fba.get_schema("outbound", "GetFulfillmentOrder")
        assert schema.group == "Outbound Shipments"
        assert schema.path == "/FulfillmentOutboundShipment/2010-10-01"
        assert schema.version == "2010-10-01"

    def test_new_request_is_fresh(self):
        """Test each factory call returns an independent Request."""
        first = fba.new_request("inbound", "GetTransportContent")
        second = fba.new_request("inbound", "GetTransportContent")

        first.assign("ShipmentId", "FBA1")
        assert not second.is_assigned("ShipmentId")

    def test_list_inbound_shipment_items_has_both_bounds(self):
        """Test LastUpdatedBefore is declared alongside LastUpdatedAfter."""
        fields = fba.get_schema("inbound", "ListInboundShipmentItems").fields

        assert fields["LastUpdatedAfter"].wire_path == "LastUpdatedAfter"
        assert fields["LastUpdatedBefore"].wire_path == "LastUpdatedBefore"
        assert fields["LastUpdatedBefore"].kind is ParamKind.TIMESTAMP

    def test_enum_fields(self):
        """Test enum-typed fields are declared as enums."""
        fields = fba.get_schema("outbound", "CreateFulfillmentOrder").fields
        assert fields["ShippingSpeedCategory"].kind is ParamKind.ENUM
        assert fields["FulfillmentPolicy"].kind is ParamKind.ENUM


class TestInbound:
    """Test inbound shipment requests."""

    def test_create_inbound_shipment(self):
        """Test a full CreateInboundShipment build."""
        request = fba.new_request("inbound", "CreateInboundShipment")
        request.assign_many({
            "ShipmentId": "FBA123",
            "ShipmentName": "March restock",
            "ShipFromName": "Warehouse",
            "ShipFromAddressLine1": "1 Main St",
            "ShipFromCity": "Seattle",
            "ShipFromStateOrProvince": "WA",
            "ShipFromPostalCode": "98101",
            "ShipFromCountryCode": "US",
            "DestinationFulfillmentCenterId": "SEA8",
        })
        shipment_items = request.new_complex("InboundShipmentItems")
        shipment_items.add_member(fba.inbound_shipment_item(5, "SKU1"))
        shipment_items.add_member(fba.inbound_shipment_item(12, "SKU2", quantity_in_case=6))
        request.assign("InboundShipmentItems", shipment_items)

        params = request.finalize()

        assert params["Action"] == "CreateInboundShipment"
        assert params["InboundShipmentHeader.ShipFromAddress.City"] == "Seattle"
        assert params["InboundShipmentItems.member.1.QuantityShipped"] == "5"
        assert params["InboundShipmentItems.member.1.SellerSKU"] == "SKU1"
        assert "InboundShipmentItems.member.1.QuantityInCase" not in params
        assert params["InboundShipmentItems.member.2.QuantityInCase"] == "6"
        assert "InboundShipmentHeader.ShipFromAddress.AddressLine2" not in params

    def test_create_inbound_shipment_requires_items(self):
        """Test missing item list is reported."""
        request = fba.new_request("inbound", "CreateInboundShipmentPlan")
        request.assign("LabelPrepPreference", "SELLER_LABEL")

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            request.finalize()

        assert exc_info.value.field_name == "InboundShipmentPlanRequestItems"

    def test_list_inbound_shipments(self):
        """Test list and timestamp fields together."""
        request = fba.new_request("inbound", "ListInboundShipments")
        request.assign("ShipmentIds", ["A", "B"])
        request.assign("ShipmentStatuses", ["WORKING"])
        request.assign("LastUpdatedBefore", datetime(2024, 3, 1))

        params = request.finalize()

        assert params == {
            "ShipmentIdList.member.1": "A",
            "ShipmentIdList.member.2": "B",
            "ShipmentStatusList.member.1": "WORKING",
            "LastUpdatedBefore": "2024-03-01T00:00:00.000Z",
            "Action": "ListInboundShipments",
            "Version": "2010-10-01",
        }

    def test_put_transport_content_packages(self):
        """Test nested package sub-fields."""
        request = fba.new_request("inbound", "PutTransportContent")
        request.assign_many({"ShipmentId": "FBA1", "IsPartnered": True, "ShipmentType": "SP"})
        packages = request.new_complex("PartneredSmallParcelDataPackageList")
        packages.add_member(fba.parcel_package("pounds", 4, "inches", 10, 8, 6))
        request.assign("PartneredSmallParcelDataPackageList", packages)

        params = request.finalize()

        prefix = "TransportDetails.PartneredSmallParcelData.PackageList.member.1"
        assert params["IsPartnered"] == "true"
        assert params[f"{prefix}.Weight.Unit"] == "pounds"
        assert params[f"{prefix}.Dimensions.Height"] == "6"


class TestOutbound:
    """Test outbound shipment requests."""

    @pytest.fixture
    def order(self):
        request = fba.new_request("outbound", "CreateFulfillmentOrder")
        request.assign_many({
            "SellerFulfillmentOrderId": "ORDER-1",
            "ShippingSpeedCategory": "Standard",
            "DisplayableOrderId": "1001",
        })
        line_items = request.new_complex("LineItems")
        line_items.add_member(fba.create_line_item("SKU1", "item-1", 2, gift_message="Happy birthday"))
        line_items.add_member(fba.create_line_item("SKU2", "item-2", 1))
        request.assign("LineItems", line_items)
        return request

    def test_create_fulfillment_order(self, order):
        """Test line items land under Items.member."""
        order.assign("NotificationEmails", ["a@example.com", "b@example.com"])
        params = order.finalize()

        assert params["Items.member.1.SellerSKU"] == "SKU1"
        assert params["Items.member.1.GiftMessage"] == "Happy birthday"
        assert "Items.member.2.GiftMessage" not in params
        assert params["Items.member.2.Quantity"] == "1"
        assert params["NotificationEmailList.member.2"] == "b@example.com"
        assert params["ShippingSpeedCategory"] == "Standard"

    def test_invalid_shipping_speed(self, order):
        """Test enum validation on catalog fields."""
        order.assign("ShippingSpeedCategory", "Overnight")

        with pytest.raises(InvalidEnumValueError) as exc_info:
            order.finalize()

        assert exc_info.value.field_name == "ShippingSpeedCategory"

    def test_preview_shipping_speeds(self):
        """Test enum list expansion."""
        request = fba.new_request("outbound", "GetFulfillmentPreview")
        request.assign("LineItems", fba.PreviewLineItems().add_member(fba.preview_line_item("SKU1", "i1", 1)))
        request.assign("ShippingSpeeds", ["Standard", "Priority"])

        params = request.finalize()

        assert params["ShippingSpeedCategories.member.1"] == "Standard"
        assert params["ShippingSpeedCategories.member.2"] == "Priority"
        assert "Items.member.1.EstimatedShippingWeight" not in params

    def test_list_all_fulfillment_orders_requires_start(self):
        """Test required timestamp."""
        request = fba.new_request("outbound", "ListAllFulfillmentOrders")

        with pytest.raises(MissingRequiredFieldError):
            request.finalize()

        request.assign("QueryStartDateTime", "2024-01-01T00:00:00Z")
        assert request.finalize()["QueryStartDateTime"] == "2024-01-01T00:00:00.000Z"

    def test_service_status(self):
        """Test an action with no fields."""
        params = fba.new_request("outbound", "GetServiceStatus").finalize()

        assert params == {"Action": "GetServiceStatus", "Version": "2010-10-01"}


class TestFactories:
    """Test ComplexList and Enum factories."""

    def test_complex_prefixes(self):
        assert fba.CreateLineItems().wire_prefix == "Items.member"
        assert fba.InboundShipmentItems().wire_prefix == "InboundShipmentItems.member"
        assert isinstance(fba.NonPartneredSmallParcelDataPackageList(), ComplexList)

    def test_enum_values(self):
        assert fba.FulfillmentPolicies().values == ("FillOrKill", "FillAll", "FillAllAvailable")
        assert "Detailed" in fba.ResponseGroups()

    def test_tracked_package(self):
        packages = fba.NonPartneredSmallParcelDataPackageList().add_member(fba.tracked_package("1Z999"))

        assert packages.flatten() == {
            "TransportDetails.NonPartneredSmallParcelData.PackageList.member.1.TrackingId": "1Z999"
        }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
