"""Chain registry export.

The registry is written out as a JSON document that external tooling,
like code generators and documentation builders, consume:

.. code-block:: json

    {
        "chains": {
            "1": {
                "internalId": "Mainnet",
                "name": "mainnet",
                "isLegacy": false,
                "isTestnet": false,
                "supportsShanghai": true,
                "averageBlocktimeHint": 12000,
                "nativeCurrencySymbol": "ETH",
                "etherscanApiKeyName": "ETHERSCAN_API_KEY",
                "etherscanApiUrl": "https://api.etherscan.io/v2/api?chainid=1",
                "etherscanBaseUrl": "https://etherscan.io"
            }
        }
    }

Keys of `chains` are decimal chain ids. Optional keys are omitted when there is no value.

The in-memory registry is always the source of truth,
the document can be read back with :py:func:`load_registry_export`.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from dataclasses_json import LetterCase, Undefined, config, dataclass_json
from marshmallow import EXCLUDE, fields
from marshmallow.validate import Range

from namedchains.exceptions import ChainError
from namedchains.named import ChainRecord, NamedChain, iter_named_chains
from namedchains.types import MAX_CHAIN_ID


logger = logging.getLogger(__name__)


#: Keys of the `chains` object
_CHAIN_ID_KEY = re.compile(r"0|[1-9][0-9]*")


class InvalidRegistryExport(ChainError):
    """A registry export document did not pass validation."""

    def __init__(self, violations: List[str]):
        self.violations = violations
        super().__init__("Invalid chain registry document:\n" + "\n".join(violations))


def _is_none(v) -> bool:
    return v is None


class StrictBoolean(fields.Boolean):
    """Only JSON true and false, no "yes" or 1"""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return value


class StrictInteger(fields.Integer):
    """JSON integers only, booleans do not count"""

    def __init__(self, **kwargs):
        super().__init__(strict=True, **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return super()._deserialize(value, attr, data, **kwargs)


def _required_string(data_key: str):
    return config(mm_field=fields.String(required=True, data_key=data_key))


def _required_flag(data_key: str):
    return config(mm_field=StrictBoolean(required=True, data_key=data_key))


def _optional_string(data_key: str):
    return config(
        exclude=_is_none,
        mm_field=fields.String(data_key=data_key),
    )


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class ChainExportRecord:
    """One chain in the registry export document."""

    #: Registry key, used as an identifier in generated code
    internal_id: str = field(metadata=_required_string("internalId"))

    #: Canonical display name
    name: str = field(metadata=_required_string("name"))

    is_legacy: bool = field(metadata=_required_flag("isLegacy"))

    is_testnet: bool = field(metadata=_required_flag("isTestnet"))

    supports_shanghai: bool = field(metadata=_required_flag("supportsShanghai"))

    #: Milliseconds
    average_blocktime_hint: Optional[int] = field(
        default=None,
        metadata=config(
            exclude=_is_none,
            mm_field=StrictInteger(validate=Range(min=0), data_key="averageBlocktimeHint"),
        )
    )

    native_currency_symbol: Optional[str] = field(default=None, metadata=_optional_string("nativeCurrencySymbol"))

    etherscan_api_key_name: Optional[str] = field(default=None, metadata=_optional_string("etherscanApiKeyName"))

    etherscan_api_url: Optional[str] = field(default=None, metadata=_optional_string("etherscanApiUrl"))

    etherscan_base_url: Optional[str] = field(default=None, metadata=_optional_string("etherscanBaseUrl"))

    @staticmethod
    def from_record(record: ChainRecord) -> "ChainExportRecord":
        return ChainExportRecord(
            internal_id=record.internal_id,
            name=record.name,
            is_legacy=record.is_legacy,
            is_testnet=record.is_testnet,
            supports_shanghai=record.supports_shanghai,
            average_blocktime_hint=record.average_blocktime_hint,
            native_currency_symbol=record.native_currency_symbol,
            etherscan_api_key_name=record.etherscan_api_key_name,
            etherscan_api_url=record.etherscan_api_url,
            etherscan_base_url=record.etherscan_base_url,
        )


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChainRegistryExport:
    """The registry export document."""

    #: Decimal chain id -> chain
    chains: Dict[str, ChainExportRecord] = field(default_factory=dict)

    def get_chain_id_mapping(self) -> Dict[int, str]:
        """Chain id -> internal id"""
        return {int(chain_id): record.internal_id for chain_id, record in self.chains.items()}


#: JSON Schema of the export document, for validators outside Python
REGISTRY_EXPORT_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Chain registry",
    "type": "object",
    "required": ["chains"],
    "properties": {
        "chains": {
            "type": "object",
            "propertyNames": {"pattern": "^(0|[1-9][0-9]*)$"},
            "additionalProperties": {"$ref": "#/definitions/ChainRecord"},
        },
    },
    "definitions": {
        "ChainRecord": {
            "type": "object",
            "required": ["internalId", "name", "isLegacy", "isTestnet", "supportsShanghai"],
            "properties": {
                "internalId": {"type": "string"},
                "name": {"type": "string"},
                "isLegacy": {"type": "boolean"},
                "isTestnet": {"type": "boolean"},
                "supportsShanghai": {"type": "boolean"},
                "averageBlocktimeHint": {"type": "integer", "minimum": 0},
                "nativeCurrencySymbol": {"type": "string"},
                "etherscanApiKeyName": {"type": "string"},
                "etherscanApiUrl": {"type": "string"},
                "etherscanBaseUrl": {"type": "string"},
            },
        },
    },
}


def export_registry(only: Optional[Iterable[NamedChain]] = None) -> ChainRegistryExport:
    """Export named chains.

    :param only:
        Export only these chains. Default is all chains.
        The output is always in declaration order.
    """
    wanted = None if only is None else set(only)
    chains = {}
    for named in iter_named_chains():
        if wanted is not None and named not in wanted:
            continue
        record = named.get_record()
        chains[str(record.chain_id)] = ChainExportRecord.from_record(record)
    logger.info("Exported %d chains", len(chains))
    return ChainRegistryExport(chains=chains)


def export_registry_json(indent: Optional[int] = 2) -> str:
    """Export all named chains as a JSON string."""
    return export_registry().to_json(indent=indent)


def validate_registry_document(doc: Union[dict, str]) -> List[str]:
    """Check a registry export document.

    Checks the same constraints as :py:data:`REGISTRY_EXPORT_SCHEMA`.

    :param doc:
        Decoded JSON or a JSON string

    :return:
        Human readable problems found. Empty if the document is valid.
    """

    if isinstance(doc, str):
        try:
            doc = json.loads(doc)
        except json.JSONDecodeError as e:
            return [f"Not JSON: {e}"]

    if not isinstance(doc, dict):
        return [f"Document must be an object, got {type(doc).__name__}"]

    chains = doc.get("chains")
    if not isinstance(chains, dict):
        return ["Document must have a chains object"]

    schema = ChainExportRecord.schema(unknown=EXCLUDE)
    violations = []
    for key, value in chains.items():
        if not _CHAIN_ID_KEY.fullmatch(key) or int(key) > MAX_CHAIN_ID:
            violations.append(f"{key}: not a decimal chain id")
            continue

        if not isinstance(value, dict):
            violations.append(f"{key}: chain must be an object, got {type(value).__name__}")
            continue

        errors = schema.validate(value)
        for field_name, messages in sorted(errors.items()):
            violations.append(f"{key}: {field_name}: {' '.join(map(str, messages))}")

    return violations


def load_registry_export(doc: Union[dict, str]) -> ChainRegistryExport:
    """Read a registry export document back.

    :raise InvalidRegistryExport:
        The document does not validate
    """
    if isinstance(doc, str):
        violations = validate_registry_document(doc)
        if not violations:
            doc = json.loads(doc)
    else:
        violations = validate_registry_document(doc)

    if violations:
        raise InvalidRegistryExport(violations)

    return ChainRegistryExport.from_dict(doc)


def read_chain_id_mapping(doc: Union[dict, str]) -> Dict[int, str]:
    """Read chain id -> internal id mapping from a registry export document."""
    return load_registry_export(doc).get_chain_id_mapping()
