"""Named chain registry.

The closed set of chains we know ahead of time. See :py:class:`NamedChain`.

- Every named chain has exactly one :py:class:`ChainRecord` with its static metadata,
  sourced from :py:data:`namedchains.chain_data.CHAIN_DATA`

- Lookup indexes by numeric chain id and by name are built once, lazily,
  on the first lookup

- The registry cannot be modified at runtime

Chains that are not in the registry are still valid chains,
see :py:class:`namedchains.chain.Chain`.
"""

import datetime
import enum
import logging
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from eth_utils import to_checksum_address

from namedchains.chain_data import (
    CHAIN_DATA,
    DNS_DISCOVERY_CHAINS,
    DNS_DISCOVERY_PREFIX,
    LEGACY_CHAINS,
    SHANGHAI_CHAINS,
    TESTNET_CHAINS,
    WRAPPED_NATIVE_TOKENS,
)
from namedchains.types import MAX_CHAIN_ID, ChecksumAddress, EnvironmentVariableName, InternalId, Milliseconds, URL


logger = logging.getLogger(__name__)


#: NamedChain -> ChainRecord
_records: Dict["NamedChain", "ChainRecord"] = {}

#: Numeric chain id -> NamedChain
_id_map: Dict[int, "NamedChain"] = {}

#: Lowercased display name or alias -> NamedChain
_name_map: Dict[str, "NamedChain"] = {}

#: Prevent _ensure_registry_lazy_init() duplicates
#:
#: Lookups may happen from several threads at the start of the process
_init_lock = threading.Lock()


@dataclass(frozen=True, slots=True)
class ChainRecord:
    """Static metadata of one named chain.

    Built from a row in :py:data:`namedchains.chain_data.CHAIN_DATA`.
    """

    #: Stable PascalCase registry key, e.g. `BinanceSmartChain`
    internal_id: InternalId

    #: EIP-155 chain id
    chain_id: int

    #: Canonical display name.
    #:
    #: This is what we write out when serialising a chain.
    name: str

    #: Alternative spellings accepted when parsing.
    #:
    #: Never written out. Does not contain :py:attr:`name`.
    aliases: FrozenSet[str]

    #: The chain does not support EIP-1559 transactions
    is_legacy: bool

    #: Testnet or a local development chain
    is_testnet: bool

    #: The chain has activated the Shanghai hardfork (PUSH0 opcode)
    supports_shanghai: bool

    #: Advisory average block time in milliseconds
    average_blocktime_hint: Optional[Milliseconds] = None

    #: E.g. `ETH`
    native_currency_symbol: Optional[str] = None

    #: Etherscan-compatible API endpoint
    etherscan_api_url: Optional[URL] = None

    #: Block explorer frontpage
    etherscan_base_url: Optional[URL] = None

    #: Environment variable a consumer should read the explorer API key from
    etherscan_api_key_name: Optional[EnvironmentVariableName] = None

    #: Checksummed address of the wrapped native token, e.g. WETH
    wrapped_native_token: Optional[ChecksumAddress] = None

    def get_accepted_names(self) -> FrozenSet[str]:
        """All spellings that parse to this chain, lowercased."""
        return frozenset(n.lower() for n in self.aliases | {self.name})


class NamedChain(enum.IntEnum):
    """Chains known to the registry.

    The member value is the EIP-155 chain id, so members compare and hash
    like their integer chain ids: `NamedChain.mainnet == 1`.

    The member name is a snake_case spelling of the chain
    and is always accepted as an alias when parsing names.
    The canonical display name comes from the metadata table,
    see :py:meth:`get_name`.

    Members are declared in the same order as rows
    in :py:data:`namedchains.chain_data.CHAIN_DATA`.
    """

    #: Ethereum mainnet
    mainnet = 1
    morden = 2
    ropsten = 3
    rinkeby = 4
    goerli = 5
    kovan = 42
    holesky = 17000
    hoodi = 560048
    sepolia = 11155111

    #: Ithaca Odyssey testnet
    odyssey = 911867

    optimism = 10
    optimism_kovan = 69
    optimism_goerli = 420
    optimism_sepolia = 11155420

    bob = 60808
    bob_sepolia = 808813

    #: Arbitrum One
    arbitrum = 42161
    arbitrum_testnet = 421611
    arbitrum_goerli = 421613
    arbitrum_sepolia = 421614
    arbitrum_nova = 42170

    cronos = 25
    cronos_testnet = 338

    #: Rootstock
    rsk = 30
    rsk_testnet = 31

    telos_evm = 40
    telos_evm_testnet = 41

    crab = 44
    darwinia = 46
    koi = 701

    #: BNB Smart Chain
    binance_smart_chain = 56
    binance_smart_chain_testnet = 97

    poa = 99
    sokol = 77

    scroll = 534352
    scroll_sepolia = 534351

    metis = 1088

    #: Conflux eSpace testnet
    cfx_testnet = 71

    #: Conflux eSpace
    cfx = 1030

    #: Gnosis chain, formerly xDai
    gnosis = 100

    polygon = 137
    polygon_amoy = 80002

    fantom = 250
    fantom_testnet = 4002

    moonbeam = 1284
    moonbeam_dev = 1281
    moonriver = 1285
    moonbase = 1287

    #: Local development chain of many tools
    dev = 1337

    #: Default chain id of Anvil and Hardhat
    anvil_hardhat = 31337

    gravity_alpha_mainnet = 1625
    gravity_alpha_testnet_sepolia = 13505

    evmos = 9001
    evmos_testnet = 9000

    plasma = 9745

    #: Gnosis testnet
    chiado = 10200

    oasis = 26863
    emerald = 42262
    emerald_testnet = 42261

    filecoin_mainnet = 314
    filecoin_calibration_testnet = 314159

    #: Avalanche C-chain
    avalanche = 43114
    avalanche_fuji = 43113

    celo = 42220
    celo_sepolia = 11142220

    aurora = 1313161554
    aurora_testnet = 1313161555

    canto = 7700
    canto_testnet = 740

    boba = 288

    base = 8453
    base_goerli = 84531
    base_sepolia = 84532

    syndr = 404
    syndr_sepolia = 444444

    shimmer = 148

    ink = 57073
    ink_sepolia = 763373

    fraxtal = 252
    fraxtal_testnet = 2522

    blast = 81457
    blast_sepolia = 168587773

    linea = 59144
    linea_goerli = 59140
    linea_sepolia = 59141

    #: ZKsync Era
    zk_sync = 324
    zk_sync_testnet = 300

    mantle = 5000
    mantle_sepolia = 5003

    xai = 660279
    xai_sepolia = 37714555429

    happychain_testnet = 216

    viction = 88

    zora = 7777777

    #: Public Goods Network
    pgn = 424
    pgn_sepolia = 58008

    mode = 34443
    mode_sepolia = 919

    elastos = 20

    etherlink = 42793
    etherlink_testnet = 128123

    degen = 666666666

    opbnb_mainnet = 204
    opbnb_testnet = 5611

    ronin = 2020
    ronin_testnet = 2021

    taiko = 167000
    taiko_hekla = 167009

    autonomys_nova_testnet = 490000

    flare = 14
    flare_coston2 = 114

    acala = 787
    acala_mandala_testnet = 595
    acala_testnet = 597
    karura = 686
    karura_testnet = 596

    pulsechain = 369
    pulsechain_testnet = 943

    #: Cannon local development chain
    cannon = 13370

    immutable = 13371
    immutable_testnet = 13473

    soneium = 1868
    soneium_minato_testnet = 1946

    #: World Chain
    world = 480
    world_sepolia = 4801

    iotex = 4689
    core = 1116
    merlin = 4200
    bitlayer = 200901
    vana = 1480
    zeta = 7000
    kaia = 8217
    story = 1514

    sei = 1329
    sei_testnet = 1328

    stable_mainnet = 988
    stable_testnet = 2201

    unichain = 130
    unichain_sepolia = 1301

    signet_pecorino = 14174

    ape_chain = 33139

    #: ApeChain testnet
    curtis = 33111

    sonic = 146
    sonic_testnet = 14601

    treasure = 61166
    treasure_topaz = 978658

    berachain_bepolia = 80069
    berachain = 80094

    superposition_testnet = 98985
    superposition = 55244

    monad = 143
    monad_testnet = 10143

    #: HyperEVM
    hyperliquid = 999

    abstract = 2741
    abstract_testnet = 11124

    corn = 21000000
    corn_testnet = 21000001

    sophon = 50104
    sophon_testnet = 531050104

    polkadot_testnet = 420420417

    lens = 232
    lens_testnet = 37111

    injective = 1776
    injective_testnet = 1439

    katana = 747474
    lisk = 1135
    fuse = 122

    fluent_devnet = 20993
    fluent_testnet = 20994

    skale_base = 1562508942
    skale_base_testnet = 324705682

    meme_core = 4352

    #: MemeCore testnet
    formicarium = 43521

    #: MemeCore testnet
    insectarium = 43522

    def get_record(self) -> ChainRecord:
        """Get the static metadata of this chain."""
        return get_record(self)

    def get_name(self) -> str:
        """Get the canonical display name, e.g. `bsc`."""
        return self.get_record().name

    def get_aliases(self) -> FrozenSet[str]:
        return self.get_record().aliases

    def __str__(self):
        return self.get_name()

    def __format__(self, format_spec):
        return format(self.get_name(), format_spec)

    def average_blocktime_hint(self) -> Optional[datetime.timedelta]:
        """Average block time of this chain.

        Only a hint, do not use for anything that needs precision.
        """
        ms = self.get_record().average_blocktime_hint
        if ms is None:
            return None
        return datetime.timedelta(milliseconds=ms)

    def etherscan_urls(self) -> Optional[Tuple[URL, URL]]:
        """Get the block explorer `(api_url, base_url)`.

        Neither URL has a trailing slash.
        """
        record = self.get_record()
        if record.etherscan_api_url is None:
            return None
        return record.etherscan_api_url, record.etherscan_base_url

    def etherscan_api_key_name(self) -> Optional[EnvironmentVariableName]:
        """Name of the environment variable to read the explorer API key from.

        We never read the environment ourselves.
        """
        return self.get_record().etherscan_api_key_name

    def native_currency_symbol(self) -> Optional[str]:
        return self.get_record().native_currency_symbol

    def wrapped_native_token(self) -> Optional[ChecksumAddress]:
        """Get the address of WETH or similar on this chain."""
        return self.get_record().wrapped_native_token

    def public_dns_network_protocol(self) -> Optional[str]:
        """EIP-1459 DNS discovery list for Ethereum networks.

        E.g. `enrtree://AKA3AM6LPBYEUDMVNU3BSVQJ5AD45Y7YPOHJLEF6W26QOE4VTUDPE@all.mainnet.ethdisco.net`
        """
        record = self.get_record()
        if record.internal_id not in DNS_DISCOVERY_CHAINS:
            return None
        return f"{DNS_DISCOVERY_PREFIX}all.{record.name.lower()}.ethdisco.net"

    def is_legacy(self) -> bool:
        return self.get_record().is_legacy

    def is_testnet(self) -> bool:
        return self.get_record().is_testnet

    def supports_shanghai(self) -> bool:
        return self.get_record().supports_shanghai

    @staticmethod
    def get_by_name(name: str) -> Optional["NamedChain"]:
        """Map a display name or an alias back to the chain.

        Case-insensitive.
        """
        return lookup_by_name(name)

    @classmethod
    def default(cls) -> "NamedChain":
        return cls.mainnet


def _is_valid_url(url: Optional[str]) -> bool:
    return url is None or (url.startswith("https://") and not url.endswith("/"))


def find_integrity_violations() -> List[str]:
    """Check the metadata table against the enum.

    Does not use the lookup indexes, so it can be run before they are built.

    :return:
        Human readable descriptions of each problem found.
        Empty if the registry is consistent.
    """

    violations = []

    members = list(NamedChain)
    if len(members) != len(NamedChain.__members__):
        # Two members with the same value turn into enum aliases
        violations.append(f"NamedChain has duplicate values: {len(NamedChain.__members__)} names, {len(members)} members")

    if len(members) != len(CHAIN_DATA):
        violations.append(f"NamedChain has {len(members)} members, metadata table has {len(CHAIN_DATA)} rows")

    for member, row in zip(members, CHAIN_DATA):
        if member.value != row["chain_id"]:
            violations.append(f"{member.name} = {member.value} is paired with row {row['internal_id']} = {row['chain_id']}")

    for row in CHAIN_DATA:
        chain_id = row["chain_id"]
        if type(chain_id) != int or not (0 <= chain_id <= MAX_CHAIN_ID):
            violations.append(f"{row['internal_id']}: chain id {chain_id!r} is not an unsigned 64-bit integer")

        api_url, base_url = row.get("explorer", (None, None))
        if not (_is_valid_url(api_url) and _is_valid_url(base_url)):
            violations.append(f"{row['internal_id']}: bad explorer URLs {api_url} {base_url}")

    for chain_id, count in Counter(row["chain_id"] for row in CHAIN_DATA).items():
        if count > 1:
            violations.append(f"Chain id {chain_id} is used by {count} rows")

    internal_ids = Counter(row["internal_id"] for row in CHAIN_DATA)
    for internal_id, count in internal_ids.items():
        if count > 1:
            violations.append(f"Internal id {internal_id} is used by {count} rows")

    # Name uniqueness is case-insensitive over display names and all aliases
    owners: Dict[str, set] = {}
    for member, row in zip(members, CHAIN_DATA):
        spellings = {row["name"], member.name, *row.get("aliases", ())}
        for spelling in spellings:
            owners.setdefault(spelling.lower(), set()).add(row["internal_id"])

    for spelling, owner_ids in sorted(owners.items()):
        if len(owner_ids) > 1:
            violations.append(f"Name {spelling} is claimed by {', '.join(sorted(owner_ids))}")

    allow_lists = {
        "LEGACY_CHAINS": LEGACY_CHAINS,
        "TESTNET_CHAINS": TESTNET_CHAINS,
        "SHANGHAI_CHAINS": SHANGHAI_CHAINS,
        "DNS_DISCOVERY_CHAINS": DNS_DISCOVERY_CHAINS,
        "WRAPPED_NATIVE_TOKENS": set(WRAPPED_NATIVE_TOKENS),
    }
    for list_name, listed in allow_lists.items():
        for unknown in sorted(set(listed) - set(internal_ids)):
            violations.append(f"{list_name} refers to unknown chain {unknown}")

    return violations


def _build_record(member: NamedChain, row: dict) -> ChainRecord:
    internal_id = row["internal_id"]
    api_url, base_url = row.get("explorer", (None, None))
    wrapped = WRAPPED_NATIVE_TOKENS.get(internal_id)
    aliases = {member.name, *row.get("aliases", ())} - {row["name"]}
    return ChainRecord(
        internal_id=internal_id,
        chain_id=row["chain_id"],
        name=row["name"],
        aliases=frozenset(aliases),
        is_legacy=internal_id in LEGACY_CHAINS,
        is_testnet=internal_id in TESTNET_CHAINS,
        supports_shanghai=internal_id in SHANGHAI_CHAINS,
        average_blocktime_hint=row.get("blocktime"),
        native_currency_symbol=row.get("currency"),
        etherscan_api_url=api_url,
        etherscan_base_url=base_url,
        etherscan_api_key_name=row.get("api_key_name"),
        wrapped_native_token=to_checksum_address(wrapped) if wrapped else None,
    )


def _ensure_registry_lazy_init():

    with _init_lock:

        if _records:
            # Already initialized
            return

        violations = find_integrity_violations()
        assert not violations, "Chain registry is inconsistent:\n" + "\n".join(violations)

        records = {}
        id_map = {}
        name_map = {}
        for member, row in zip(NamedChain, CHAIN_DATA):
            record = _build_record(member, row)
            records[member] = record
            id_map[record.chain_id] = member
            for spelling in record.get_accepted_names():
                name_map[spelling] = member

        # Publish the indexes only when complete,
        # the lock-free readers check _records first
        _id_map.update(id_map)
        _name_map.update(name_map)
        _records.update(records)

        logger.debug("Chain registry initialised, %d chains, %d names", len(_records), len(_name_map))


def iter_named_chains() -> Iterator[NamedChain]:
    """Iterate all named chains in declaration order.

    Each call returns a fresh iterator.
    """
    return iter(NamedChain)


def get_record(named: NamedChain) -> ChainRecord:
    """Get the metadata record of a named chain."""
    if not _records:
        _ensure_registry_lazy_init()
    return _records[NamedChain(named)]


def lookup_by_id(chain_id: int) -> Optional[NamedChain]:
    """Find the named chain for a numeric chain id.

    :return:
        `None` if the chain id is not in the registry
    """
    if not _records:
        _ensure_registry_lazy_init()
    return _id_map.get(chain_id)


def lookup_by_name(name: str) -> Optional[NamedChain]:
    """Find a named chain by its display name or any of its aliases.

    Case-insensitive.

    :return:
        `None` if nothing matches
    """
    if not _records:
        _ensure_registry_lazy_init()
    return _name_map.get(name.lower())
