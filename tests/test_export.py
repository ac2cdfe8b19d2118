import json
import logging

import pytest

from namedchains.export import (
    REGISTRY_EXPORT_SCHEMA,
    ChainExportRecord,
    InvalidRegistryExport,
    export_registry,
    export_registry_json,
    load_registry_export,
    read_chain_id_mapping,
    validate_registry_document,
)
from namedchains.named import NamedChain


def _valid_record() -> dict:
    return {
        "internalId": "Mainnet",
        "name": "mainnet",
        "isLegacy": False,
        "isTestnet": False,
        "supportsShanghai": True,
    }


def test_export_round_trip():
    """Export to JSON, read back, and compare chain id -> internal id mapping."""
    doc = export_registry_json()
    mapping = read_chain_id_mapping(json.loads(doc))
    expected = {named.value: named.get_record().internal_id for named in NamedChain}
    assert mapping == expected

    # Strings are accepted too
    assert read_chain_id_mapping(doc) == expected


def test_export_validates():
    doc = json.loads(export_registry_json())
    assert validate_registry_document(doc) == []
    assert len(doc["chains"]) == len(NamedChain)
    assert list(doc["chains"].keys())[0:2] == ["1", "2"]


def test_export_mainnet_record():
    doc = export_registry().to_dict()
    assert doc["chains"]["1"] == {
        "internalId": "Mainnet",
        "name": "mainnet",
        "isLegacy": False,
        "isTestnet": False,
        "supportsShanghai": True,
        "averageBlocktimeHint": 12000,
        "nativeCurrencySymbol": "ETH",
        "etherscanApiKeyName": "ETHERSCAN_API_KEY",
        "etherscanApiUrl": "https://api.etherscan.io/v2/api?chainid=1",
        "etherscanBaseUrl": "https://etherscan.io",
    }


def test_export_omits_missing_optional_keys():
    doc = export_registry().to_dict()
    assert doc["chains"]["99"] == {
        "internalId": "Poa",
        "name": "poa",
        "isLegacy": False,
        "isTestnet": False,
        "supportsShanghai": False,
    }
    assert set(doc["chains"]["31337"].keys()) == {
        "internalId",
        "name",
        "isLegacy",
        "isTestnet",
        "supportsShanghai",
        "averageBlocktimeHint",
    }


def test_export_subset():
    export = export_registry(only=[NamedChain.base, NamedChain.mainnet])
    assert list(export.chains.keys()) == ["1", "8453"]
    assert export.get_chain_id_mapping() == {1: "Mainnet", 8453: "Base"}


def test_export_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="namedchains.export"):
        export_registry()
    assert f"Exported {len(NamedChain)} chains" in caplog.text


def test_load_registry_export():
    export = load_registry_export({"chains": {"1": _valid_record()}, "generator": "someone else"})
    record = export.chains["1"]
    assert isinstance(record, ChainExportRecord)
    assert record.internal_id == "Mainnet"
    assert record.supports_shanghai
    assert record.average_blocktime_hint is None


def test_extra_record_keys_ignored():
    record = dict(_valid_record(), rpcUrl="https://example.com")
    assert validate_registry_document({"chains": {"1": record}}) == []
    assert load_registry_export({"chains": {"1": record}}).chains["1"].name == "mainnet"


@pytest.mark.parametrize("doc", [
    [],
    {},
    {"chains": []},
    "not json",
])
def test_invalid_document_shape(doc):
    assert validate_registry_document(doc) != []


@pytest.mark.parametrize("key", ["01", "abc", "-1", "18446744073709551616", ""])
def test_invalid_chain_id_key(key):
    violations = validate_registry_document({"chains": {key: _valid_record()}})
    assert violations == [f"{key}: not a decimal chain id"]


@pytest.mark.parametrize("field_name,value", [
    ("internalId", None),
    ("internalId", 1),
    ("name", ["mainnet"]),
    ("isLegacy", 1),
    ("isTestnet", "false"),
    ("supportsShanghai", None),
    ("averageBlocktimeHint", -1),
    ("averageBlocktimeHint", 1.5),
    ("averageBlocktimeHint", True),
    ("averageBlocktimeHint", "12000"),
    ("nativeCurrencySymbol", 1),
    ("etherscanApiUrl", False),
])
def test_invalid_record_field(field_name, value):
    record = dict(_valid_record())
    record[field_name] = value
    violations = validate_registry_document({"chains": {"1": record}})
    assert len(violations) == 1
    assert violations[0].startswith(f"1: {field_name}: ")


@pytest.mark.parametrize("field_name", ["internalId", "name", "isLegacy", "isTestnet", "supportsShanghai"])
def test_missing_required_field(field_name):
    record = dict(_valid_record())
    del record[field_name]
    violations = validate_registry_document({"chains": {"1": record}})
    assert violations == [f"1: {field_name}: Missing data for required field."]


def test_load_invalid_raises():
    with pytest.raises(InvalidRegistryExport) as exc_info:
        load_registry_export({"chains": {"1": {"name": "mainnet"}}})
    assert len(exc_info.value.violations) == 4


def test_json_schema_matches_record_fields():
    definition = REGISTRY_EXPORT_SCHEMA["definitions"]["ChainRecord"]
    schema_fields = {f.data_key for f in ChainExportRecord.schema().fields.values()}
    assert set(definition["properties"].keys()) == schema_fields
    assert REGISTRY_EXPORT_SCHEMA["required"] == ["chains"]
