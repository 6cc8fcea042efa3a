import datetime
import os
from typing import ClassVar, Optional, Union

import pytest
from attrs import define
from dateutil.tz import tzutc

from trust_payments_client.descriptor import describe
from trust_payments_client.errors import SerializationError
from trust_payments_client.models import (
    CreationEntityState,
    CriteriaOperator,
    DatabaseTranslatedString,
    DatabaseTranslatedStringItem,
    EntityQuery,
    EntityQueryFilter,
    EntityQueryFilterType,
    EntityQueryOrderBy,
    EntityQueryOrderByType,
    Model,
    ProductFeeType,
    ProductMeteredFee,
    ProductMeteredFeeUpdate,
    ProductMeteredTierPricing,
    SubscriptionMetric,
    SubscriptionProductComponent,
    model_field,
)
from trust_payments_client.serializer import ObjectSerializer
from trust_payments_client.types import UNSET, File, Unset


@define
class Payer(Model):
    discriminator: ClassVar[Optional[str]] = "payerType"

    payer_type: Union[Unset, str] = model_field("payerType")
    name: Union[Unset, str] = model_field()


@define
class CompanyPayer(Payer):
    vat_number: Union[Unset, str] = model_field("vatNumber")


def translated(text: str) -> DatabaseTranslatedString:
    return DatabaseTranslatedString(
        available_languages=["en-US", "de-DE"],
        display_name=text,
        items=[
            DatabaseTranslatedStringItem(language="en-US", language_code="en", translation=text),
            DatabaseTranslatedStringItem(language="de-DE", language_code="de", translation=f"{text} (de)"),
        ],
    )


@pytest.fixture
def serializer(tmp_path):
    return ObjectSerializer(temp_folder_path=str(tmp_path))


@pytest.fixture
def metered_fee():
    return ProductMeteredFee(
        component=SubscriptionProductComponent(
            id=11,
            linked_space_id=405,
            name=translated("Gold"),
            default_component=True,
            minimal_quantity=1.0,
            maximal_quantity=10.5,
            sort_order=2,
            version=3,
        ),
        description=translated("API calls"),
        id=1234567890123,
        linked_space_id=405,
        metric=SubscriptionMetric(
            id=7,
            linked_space_id=405,
            name=translated("Calls"),
            planned_purge_date=datetime.datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=tzutc()),
            state=CreationEntityState.ACTIVE,
            version=1,
        ),
        name=translated("Metered calls"),
        tier_pricing=ProductMeteredTierPricing.INCREMENTAL_DISCOUNT_PRICING,
        type_=ProductFeeType.METERED_FEE,
        version=4,
    )


def test_model_round_trip(serializer, metered_fee):
    data = serializer.sanitize_for_serialization(metered_fee)

    assert serializer.deserialize(data, ProductMeteredFee) == metered_fee


def test_model_round_trip_through_model_helpers(metered_fee):
    assert ProductMeteredFee.from_dict(metered_fee.to_dict()) == metered_fee


def test_recursive_model_round_trip(serializer):
    query = EntityQuery(
        filter_=EntityQueryFilter(
            type_=EntityQueryFilterType.AND,
            children=[
                EntityQueryFilter(
                    type_=EntityQueryFilterType.LEAF,
                    field_name="state",
                    operator=CriteriaOperator.EQUALS,
                    value="ACTIVE",
                ),
                EntityQueryFilter(
                    type_=EntityQueryFilterType.OR,
                    children=[
                        EntityQueryFilter(
                            type_=EntityQueryFilterType.LEAF,
                            field_name="id",
                            operator=CriteriaOperator.GREATER_THAN,
                            value=10,
                        )
                    ],
                ),
            ],
        ),
        number_of_entities=20,
        order_bys=[EntityQueryOrderBy(field_name="createdOn", sorting=EntityQueryOrderByType.DESC)],
    )

    data = serializer.sanitize_for_serialization(query)

    assert data["filter"]["children"][1]["children"][0] == {
        "fieldName": "id",
        "operator": "GREATER_THAN",
        "type": "LEAF",
        "value": 10,
    }
    assert serializer.deserialize(data, EntityQuery) == query


def test_serialize_uses_wire_names_and_skips_unset(serializer):
    data = serializer.sanitize_for_serialization(
        ProductMeteredFee(id=1, linked_space_id=405, tier_pricing=ProductMeteredTierPricing.CHEAPEST_TIER_PRICING)
    )

    assert data == {"id": 1, "linkedSpaceId": 405, "tierPricing": "CHEAPEST_TIER_PRICING"}


def test_serialize_keeps_explicit_none(serializer):
    assert serializer.sanitize_for_serialization(ProductMeteredFee(id=None)) == {"id": None}


def test_serialize_follows_declared_field_order(serializer):
    data = serializer.sanitize_for_serialization(ProductMeteredFee(version=1, type_=ProductFeeType.SETUP_FEE, id=5))

    assert list(data) == ["id", "type", "version"]


def test_serialize_dates(serializer):
    moment = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=tzutc())

    assert serializer.sanitize_for_serialization(moment) == "2024-01-02T03:04:05.000+00:00"
    assert serializer.sanitize_for_serialization(moment, format="date") == "2024-01-02"
    assert serializer.sanitize_for_serialization(datetime.date(2024, 1, 2)) == "2024-01-02"


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime.datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05.000+00:00"),
        (datetime.datetime(2024, 1, 2, 3, 4, 5, 250999, tzinfo=tzutc()), "2024-01-02T03:04:05.250+00:00"),
        (
            datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone(datetime.timedelta(hours=2))),
            "2024-01-02T03:04:05.000+02:00",
        ),
    ],
)
def test_serialize_datetimes_use_one_layout(serializer, moment, expected):
    assert serializer.sanitize_for_serialization(moment) == expected


def test_serialize_maps_and_bytes(serializer):
    update = ProductMeteredFeeUpdate(name={"en-US": "Calls", "de-DE": "Aufrufe"})

    assert serializer.sanitize_for_serialization(update) == {"name": {"en-US": "Calls", "de-DE": "Aufrufe"}}
    assert serializer.sanitize_for_serialization(b"\x00\x01") == "AAE="
    assert serializer.deserialize("AAE=", bytes) == b"\x00\x01"


def test_serialize_rejects_int32_overflow(serializer):
    with pytest.raises(SerializationError):
        serializer.sanitize_for_serialization(SubscriptionMetric(version=2**31))


def test_serialize_accepts_large_int64(serializer):
    assert serializer.sanitize_for_serialization(SubscriptionMetric(id=2**40)) == {"id": 2**40}


def test_serialize_rejects_unknown_objects(serializer):
    with pytest.raises(SerializationError):
        serializer.sanitize_for_serialization({"value": object()})


def test_deserialize_ignores_unknown_keys_and_leaves_missing_unset(serializer):
    fee = serializer.deserialize({"id": 3, "somethingNew": {"a": 1}}, ProductMeteredFee)

    assert fee.id == 3
    assert fee.metric is UNSET
    assert isinstance(fee.linked_space_id, Unset)


def test_deserialize_null_field(serializer):
    assert serializer.deserialize({"metric": None}, ProductMeteredFee).metric is None


def test_deserialize_nested_types(serializer):
    fee = serializer.deserialize(
        {
            "linkedSpaceId": 405,
            "type": "METERED_FEE",
            "metric": {"id": 7, "plannedPurgeDate": "2024-05-01T12:30:15.250Z", "state": "ACTIVE"},
            "name": {"items": [{"languageCode": "en", "translation": "Calls"}]},
        },
        ProductMeteredFee,
    )

    assert fee.linked_space_id == 405
    assert fee.type_ is ProductFeeType.METERED_FEE
    assert fee.metric.state is CreationEntityState.ACTIVE
    assert fee.metric.planned_purge_date == datetime.datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=tzutc())
    assert fee.name.items[0].translation == "Calls"


@pytest.mark.parametrize(
    "data",
    [
        {"metric": "7"},
        {"metric": [{"id": 7}]},
        {"id": "7"},
        {"id": True},
        {"version": 2**31},
        {"type": "NO_SUCH_TYPE"},
        {"name": {"items": {"translation": "x"}}},
        {"metric": {"plannedPurgeDate": "yesterday"}},
        {"metric": {"plannedPurgeDate": 1700000000}},
    ],
)
def test_deserialize_rejects_incompatible_shapes(serializer, data):
    with pytest.raises(SerializationError):
        serializer.deserialize(data, ProductMeteredFee)


def test_deserialize_rejects_non_object_for_model(serializer):
    with pytest.raises(SerializationError, match="Expected a JSON object"):
        serializer.deserialize("plain text", ProductMeteredFee)


def test_deserialize_collections(serializer):
    assert serializer.deserialize([{"id": 1}, {"id": 2}], list[SubscriptionMetric]) == [
        SubscriptionMetric(id=1),
        SubscriptionMetric(id=2),
    ]
    assert serializer.deserialize({"a": 1.5, "b": 2}, dict[str, float]) == {"a": 1.5, "b": 2.0}
    assert serializer.deserialize("2024-01-02", datetime.date) == datetime.date(2024, 1, 2)


def test_deserialize_resolves_discriminator(serializer):
    payer = serializer.deserialize({"payerType": "CompanyPayer", "name": "ACME", "vatNumber": "CHE-1"}, Payer)

    assert isinstance(payer, CompanyPayer)
    assert payer.vat_number == "CHE-1"


def test_deserialize_unknown_discriminator_keeps_declared_type(serializer):
    payer = serializer.deserialize({"payerType": "Unknown", "name": "ACME"}, Payer)

    assert type(payer) is Payer
    assert payer.name == "ACME"


def build_unrelated_company_payer():
    @define
    class CompanyPayer(Model):
        vat_number: Union[Unset, str] = model_field("vatNumber")

    return CompanyPayer


def test_subtypes_are_scoped_to_their_discriminated_base(serializer):
    unrelated = build_unrelated_company_payer()

    payer = serializer.deserialize({"payerType": "CompanyPayer", "vatNumber": "CHE-1"}, Payer)

    assert type(payer) is CompanyPayer
    assert payer.vat_number == "CHE-1"
    assert Payer.subtype("CompanyPayer") is CompanyPayer
    assert unrelated.subtype("CompanyPayer") is unrelated


def test_descriptor_exposes_wire_names_and_formats():
    descriptor = describe(ProductMeteredFee)

    assert descriptor.wire_names == [
        "component",
        "description",
        "id",
        "linkedSpaceId",
        "metric",
        "name",
        "tierPricing",
        "type",
        "version",
    ]
    assert descriptor.field("linkedSpaceId").format == "int64"
    assert descriptor.field("version").format == "int32"
    assert describe(ProductMeteredFee) is descriptor


def test_model_item_access_goes_through_the_descriptor(metered_fee):
    assert metered_fee["linked_space_id"] == 405
    assert metered_fee["linkedSpaceId"] == 405
    assert "tierPricing" in metered_fee

    metered_fee["linkedSpaceId"] = 406
    assert metered_fee.linked_space_id == 406

    del metered_fee["version"]
    assert "version" not in metered_fee

    with pytest.raises(KeyError):
        metered_fee["container"]


def test_model_str_is_json(metered_fee):
    assert '"linkedSpaceId": 405' in str(metered_fee)


def test_deserialize_file_uses_content_disposition(serializer, tmp_path):
    file = serializer.deserialize_file(
        b"%PDF-1.4",
        {"content-disposition": 'attachment; filename="../invoice.pdf"', "content-type": "application/pdf"},
    )
    try:
        assert isinstance(file, File)
        assert file.file_name == "invoice.pdf"
        assert file.mime_type == "application/pdf"
        assert os.path.dirname(file.path) == str(tmp_path)
        assert file.path.endswith("-invoice.pdf")
        assert file.payload.read() == b"%PDF-1.4"
    finally:
        file.payload.close()


def test_deserialize_file_names_are_unique(serializer):
    first = serializer.deserialize(b"a", File)
    second = serializer.deserialize(b"b", File)
    first.payload.close()
    second.payload.close()

    assert first.path != second.path


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (datetime.datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05.000+00:00"),
        (datetime.date(2024, 1, 2), "2024-01-02"),
        (ProductFeeType.SETUP_FEE, "SETUP_FEE"),
        (12, "12"),
    ],
)
def test_to_string(serializer, value, expected):
    assert serializer.to_string(value) == expected


def test_parameter_values(serializer):
    assert serializer.to_query_value([1, 2, 3]) == "1,2,3"
    assert serializer.to_header_value(5) == "5"


@pytest.mark.parametrize(
    "collection_format, expected",
    [
        ("csv", "a,b"),
        ("ssv", "a b"),
        ("tsv", "a\tb"),
        ("pipes", "a|b"),
        ("multi", ["a", "b"]),
        ("unknown", "a,b"),
    ],
)
def test_serialize_collection(serializer, collection_format, expected):
    assert serializer.serialize_collection(["a", "b"], collection_format) == expected


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("invoice.pdf", "invoice.pdf"),
        ("../../etc/passwd", "passwd"),
        ("C:\\temp\\report.csv", "report.csv"),
    ],
)
def test_sanitize_filename(filename, expected):
    assert ObjectSerializer.sanitize_filename(filename) == expected
