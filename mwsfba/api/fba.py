"""
Fulfillment By Amazon (FBA) action catalog

Static schemas for the Inbound Shipment, Inventory and Outbound Shipment
APIs (version 2010-10-01), plus the ComplexList and Enum factories their
fields use. Schemas are read-only; every call to new_request() returns a
fresh, independently owned Request.
"""

import logging
from typing import Any, Dict, List, Optional

from mwsfba.builder.complex_list import ComplexList
from mwsfba.builder.enums import Enum
from mwsfba.builder.request import Request
from mwsfba.errors import UnknownActionError
from mwsfba.schema.models import ActionSchema, ParameterDefinition, ParamKind, ServiceGroup

logger = logging.getLogger(__name__)

VERSION = "2010-10-01"

INBOUND = ServiceGroup("Fulfillment", "Inbound Shipments", "/FulfillmentInboundShipment/2010-10-01", VERSION)
INVENTORY = ServiceGroup("Fulfillment", "Inventory", "/FulfillmentInventory/2010-10-01", VERSION)
OUTBOUND = ServiceGroup("Fulfillment", "Outbound Shipments", "/FulfillmentOutboundShipment/2010-10-01", VERSION)


# ============================================================================
# ComplexList factories
# ============================================================================


def InboundShipmentItems() -> ComplexList:
    """Items for CreateInboundShipment and UpdateInboundShipment"""
    return ComplexList("InboundShipmentItems.member")


def InboundShipmentPlanRequestItems() -> ComplexList:
    """Items for CreateInboundShipmentPlan"""
    return ComplexList("InboundShipmentPlanRequestItems.member")


def CreateLineItems() -> ComplexList:
    """Line items for CreateFulfillmentOrder and UpdateFulfillmentOrder"""
    return ComplexList("Items.member")


def PreviewLineItems() -> ComplexList:
    """Line items for GetFulfillmentPreview"""
    return ComplexList("Items.member")


def PartneredSmallParcelDataPackageList() -> ComplexList:
    return ComplexList("TransportDetails.PartneredSmallParcelData.PackageList.member")


def NonPartneredSmallParcelDataPackageList() -> ComplexList:
    return ComplexList("TransportDetails.NonPartneredSmallParcelData.PackageList.member")


# ============================================================================
# Member builders (None sub-fields are dropped on flatten)
# ============================================================================


def inbound_shipment_item(quantity_shipped, seller_sku, quantity_in_case=None) -> Dict[str, Any]:
    return {
        "QuantityShipped": quantity_shipped,
        "SellerSKU": seller_sku,
        "QuantityInCase": quantity_in_case,
    }


def inbound_shipment_plan_item(seller_sku, asin, quantity, condition, quantity_in_case=None) -> Dict[str, Any]:
    return {
        "SellerSKU": seller_sku,
        "ASIN": asin,
        "Quantity": quantity,
        "Condition": condition,
        "QuantityInCase": quantity_in_case,
    }


def create_line_item(
    seller_sku,
    order_item_id,
    quantity,
    comment=None,
    gift_message=None,
    declared_unit_value=None,
    declared_value_currency=None,
) -> Dict[str, Any]:
    """Member for CreateLineItems; only SKU, item id and quantity are required"""
    return {
        "DisplayableComment": comment,
        "GiftMessage": gift_message,
        "PerUnitDeclaredValue.Value": declared_unit_value,
        "PerUnitDeclaredValue.CurrencyCode": declared_value_currency,
        "Quantity": quantity,
        "SellerFulfillmentOrderItemId": order_item_id,
        "SellerSKU": seller_sku,
    }


def preview_line_item(
    seller_sku,
    order_item_id,
    quantity,
    estimated_shipping_weight=None,
    weight_calculation_method=None,
) -> Dict[str, Any]:
    return {
        "Quantity": quantity,
        "SellerFulfillmentOrderItemId": order_item_id,
        "SellerSKU": seller_sku,
        "EstimatedShippingWeight": estimated_shipping_weight,
        "ShippingWeightCalculationMethod": weight_calculation_method,
    }


def parcel_package(weight_unit, weight_value, dimensions_unit, length, width, height) -> Dict[str, Any]:
    return {
        "Weight.Unit": weight_unit,
        "Weight.Value": weight_value,
        "Dimensions.Unit": dimensions_unit,
        "Dimensions.Length": length,
        "Dimensions.Width": width,
        "Dimensions.Height": height,
    }


def tracked_package(tracking_id) -> Dict[str, Any]:
    return {"TrackingId": tracking_id}


# ============================================================================
# Enum factories
# ============================================================================


def ResponseGroups() -> Enum:
    return Enum(["Basic", "Detailed"])


def ShippingSpeedCategories() -> Enum:
    return Enum(["Standard", "Expedited", "Priority"])


def FulfillmentPolicies() -> Enum:
    return Enum(["FillOrKill", "FillAll", "FillAllAvailable"])


# ============================================================================
# Field helpers
# ============================================================================


def _plain(wire_path: str, required: bool = False, is_list: bool = False) -> ParameterDefinition:
    return ParameterDefinition(wire_path, required=required, is_list=is_list)


def _timestamp(wire_path: str, required: bool = False) -> ParameterDefinition:
    return ParameterDefinition(wire_path, required=required, kind=ParamKind.TIMESTAMP)


def _enum(wire_path: str, construct, required: bool = False, is_list: bool = False) -> ParameterDefinition:
    return ParameterDefinition(wire_path, required=required, kind=ParamKind.ENUM, is_list=is_list, construct=construct)


def _complex(construct, required: bool = False) -> ParameterDefinition:
    return ParameterDefinition(construct().wire_prefix, required=required, kind=ParamKind.COMPLEX, construct=construct)


def _shipment_header(prefix: str, header_required: bool) -> Dict[str, ParameterDefinition]:
    """Ship-from address fields shared by the inbound shipment actions"""
    return {
        "ShipFromName": _plain(f"{prefix}ShipFromAddress.Name", header_required),
        "ShipFromAddressLine1": _plain(f"{prefix}ShipFromAddress.AddressLine1", header_required),
        "ShipFromAddressLine2": _plain(f"{prefix}ShipFromAddress.AddressLine2"),
        "ShipFromCity": _plain(f"{prefix}ShipFromAddress.City", header_required),
        "ShipFromDistrictOrCounty": _plain(f"{prefix}ShipFromAddress.DistrictOrCounty"),
        "ShipFromStateOrProvince": _plain(f"{prefix}ShipFromAddress.StateOrProvinceCode", header_required),
        "ShipFromPostalCode": _plain(f"{prefix}ShipFromAddress.PostalCode", header_required),
        "ShipFromCountryCode": _plain(f"{prefix}ShipFromAddress.CountryCode", header_required),
    }


def _shipment_fields() -> Dict[str, ParameterDefinition]:
    header = "InboundShipmentHeader."
    fields = {
        "ShipmentId": _plain("ShipmentId", required=True),
        "ShipmentName": _plain(f"{header}ShipmentName", required=True),
    }
    fields.update(_shipment_header(header, header_required=True))
    fields.update({
        "DestinationFulfillmentCenterId": _plain(f"{header}DestinationFulfillmentCenterId", required=True),
        "ShipmentStatus": _plain(f"{header}ShipmentStatus"),
        "IntendedBoxContentsSource": _plain(f"{header}IntendedBoxContentsSource"),
        "LabelPrepPreference": _plain(f"{header}LabelPrepPreference"),
        "InboundShipmentItems": _complex(InboundShipmentItems, required=True),
    })
    return fields


def _destination_address(prefix: str) -> Dict[str, ParameterDefinition]:
    return {
        "Name": _plain(f"{prefix}.Name"),
        "AddressLine1": _plain(f"{prefix}.Line1"),
        "AddressLine2": _plain(f"{prefix}.Line2"),
        "AddressLine3": _plain(f"{prefix}.Line3"),
        "City": _plain(f"{prefix}.City"),
        "StateOrProvince": _plain(f"{prefix}.StateOrProvinceCode"),
        "PostalCode": _plain(f"{prefix}.PostalCode"),
        "CountryCode": _plain(f"{prefix}.CountryCode"),
        "DistrictOrCounty": _plain(f"{prefix}.DistrictOrCounty"),
        "PhoneNumber": _plain(f"{prefix}.PhoneNumber"),
    }


def _fulfillment_order_fields(line_items_required: bool) -> Dict[str, ParameterDefinition]:
    fields = {
        "SellerFulfillmentOrderId": _plain("SellerFulfillmentOrderId", required=True),
        "ShippingSpeedCategory": _enum("ShippingSpeedCategory", ShippingSpeedCategories, required=True),
        "DisplayableOrderId": _plain("DisplayableOrderId", required=True),
        "DisplayableOrderDateTime": _timestamp("DisplayableOrderDateTime"),
        "DisplayableOrderComment": _plain("DisplayableOrderComment"),
        "FulfillmentPolicy": _enum("FulfillmentPolicy", FulfillmentPolicies),
        "FulfillmentAction": _plain("FulfillmentAction"),
        "NotificationEmails": _plain("NotificationEmailList.member", is_list=True),
    }
    fields.update({f"Dest{name}": d for name, d in _destination_address("DestinationAddress").items()})
    fields["LineItems"] = _complex(CreateLineItems, required=line_items_required)
    return fields


def _next_token(group: ServiceGroup, action: str) -> ActionSchema:
    return group.action(action, {"NextToken": _plain("NextToken", required=True)})


# ============================================================================
# Catalog
# ============================================================================


def _inbound() -> Dict[str, ActionSchema]:
    plan_fields = {"LabelPrepPreference": _plain("LabelPrepPreference", required=True)}
    plan_fields.update(_shipment_header("", header_required=False))
    plan_fields["InboundShipmentPlanRequestItems"] = _complex(InboundShipmentPlanRequestItems, required=True)

    schemas = [
        INBOUND.action("GetServiceStatus"),
        INBOUND.action("CreateInboundShipment", _shipment_fields()),
        INBOUND.action("CreateInboundShipmentPlan", plan_fields),
        INBOUND.action("ListInboundShipmentItems", {
            "ShipmentId": _plain("ShipmentId", required=True),
            "LastUpdatedAfter": _timestamp("LastUpdatedAfter"),
            "LastUpdatedBefore": _timestamp("LastUpdatedBefore"),
        }),
        _next_token(INBOUND, "ListInboundShipmentItemsByNextToken"),
        INBOUND.action("ListInboundShipments", {
            "ShipmentStatuses": _plain("ShipmentStatusList.member", is_list=True),
            "ShipmentIds": _plain("ShipmentIdList.member", is_list=True),
            "LastUpdatedAfter": _timestamp("LastUpdatedAfter"),
            "LastUpdatedBefore": _timestamp("LastUpdatedBefore"),
        }),
        _next_token(INBOUND, "ListInboundShipmentsByNextToken"),
        INBOUND.action("UpdateInboundShipment", _shipment_fields()),
        INBOUND.action("PutTransportContent", {
            "ShipmentId": _plain("ShipmentId", required=True),
            "IsPartnered": _plain("IsPartnered", required=True),
            "ShipmentType": _plain("ShipmentType", required=True),
            "PartneredSmallParcelDataCarrierName": _plain("TransportDetails.PartneredSmallParcelData.CarrierName"),
            "PartneredSmallParcelDataPackageList": _complex(PartneredSmallParcelDataPackageList),
            "NonPartneredSmallParcelDataCarrierName": _plain("TransportDetails.NonPartneredSmallParcelData.CarrierName"),
            "NonPartneredSmallParcelDataPackageList": _complex(NonPartneredSmallParcelDataPackageList),
            "NonPartneredLtlDataCarrierName": _plain("TransportDetails.NonPartneredLtlData.CarrierName"),
            "NonPartneredLtlDataProNumber": _plain("TransportDetails.NonPartneredLtlData.ProNumber"),
        }),
        INBOUND.action("GetTransportContent", {"ShipmentId": _plain("ShipmentId", required=True)}),
    ]
    return {schema.action: schema for schema in schemas}


def _inventory() -> Dict[str, ActionSchema]:
    schemas = [
        INVENTORY.action("GetServiceStatus"),
        INVENTORY.action("ListInventorySupply", {
            "SellerSkus": _plain("SellerSkus.member", is_list=True),
            "QueryStartDateTime": _timestamp("QueryStartDateTime"),
            "ResponseGroup": _enum("ResponseGroup", ResponseGroups),
        }),
        _next_token(INVENTORY, "ListInventorySupplyByNextToken"),
    ]
    return {schema.action: schema for schema in schemas}


def _outbound() -> Dict[str, ActionSchema]:
    create_fields = _fulfillment_order_fields(line_items_required=True)
    create_fields["FulfillmentMethod"] = _plain("FulfillmentMethod")

    preview_fields = {f"To{name}": d for name, d in _destination_address("Address").items()}
    preview_fields["LineItems"] = _complex(PreviewLineItems, required=True)
    preview_fields["ShippingSpeeds"] = _enum("ShippingSpeedCategories.member", ShippingSpeedCategories, is_list=True)

    order_id = {"SellerFulfillmentOrderId": _plain("SellerFulfillmentOrderId", required=True)}

    schemas = [
        OUTBOUND.action("GetServiceStatus"),
        OUTBOUND.action("CancelFulfillmentOrder", order_id),
        OUTBOUND.action("CreateFulfillmentOrder", create_fields),
        OUTBOUND.action("UpdateFulfillmentOrder", _fulfillment_order_fields(line_items_required=False)),
        OUTBOUND.action("GetFulfillmentOrder", order_id),
        OUTBOUND.action("GetFulfillmentPreview", preview_fields),
        OUTBOUND.action("ListAllFulfillmentOrders", {
            "QueryStartDateTime": _timestamp("QueryStartDateTime", required=True),
            "FulfillmentMethods": _plain("FulfillmentMethod.member", is_list=True),
        }),
        _next_token(OUTBOUND, "ListAllFulfillmentOrdersByNextToken"),
    ]
    return {schema.action: schema for schema in schemas}


CATALOG: Dict[str, Dict[str, ActionSchema]] = {
    "inbound": _inbound(),
    "inventory": _inventory(),
    "outbound": _outbound(),
}


def get_schema(section: str, action: str) -> ActionSchema:
    """
    Look up an action schema

    Raises:
        UnknownActionError: if section or action is not in the catalog
    """
    schema = CATALOG.get(section, {}).get(action)
    if schema is None:
        raise UnknownActionError(section, action)
    return schema


def new_request(section: str, action: str) -> Request:
    """Return a fresh Request for a catalog action"""
    schema = get_schema(section, action)
    logger.debug(f"New {schema.group} request: {action}")
    return Request(schema)


def list_actions(section: Optional[str] = None) -> List[tuple]:
    """
    List catalog actions

    Returns:
        Sorted list of (section, action) tuples
    """
    sections = [section] if section else sorted(CATALOG)
    result = []
    for name in sections:
        if name not in CATALOG:
            raise UnknownActionError(name, "*")
        result.extend((name, action) for action in sorted(CATALOG[name]))
    return result
