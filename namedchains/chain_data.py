"""Static chain metadata.

The metadata table is an ordered tuple of per-chain rows.
The row order is the declaration order of :py:class:`namedchains.named.NamedChain`
and the table is the only place where chain metadata lives.

Each row is a dict with keys

- `internal_id`: PascalCase registry key, also used as `internalId` in the registry export

- `chain_id`: EIP-155 chain id

- `name`: canonical display name, written out on serialisation

- `aliases`: alternative spellings accepted on parsing, never written out

- `blocktime`: average block time hint in milliseconds

- `currency`: native currency symbol

- `explorer`: `(api_url, base_url)` tuple of an Etherscan-like explorer, no trailing slashes

- `api_key_name`: the name of the environment variable holding the explorer API key

Only `internal_id`, `chain_id` and `name` are mandatory.

Boolean flags (legacy, testnet, Shanghai) are not stored on rows,
but in explicit allow-lists below. A chain missing from an allow-list
does not have the flag.

When adding a new chain:

1. Add a row to :py:data:`CHAIN_DATA`

2. Add a member to :py:class:`namedchains.named.NamedChain` at the same position

3. Add the chain to the allow-lists and families in :py:mod:`namedchains.classification` where applicable

4. Run the test suite, it checks ids, names and aliases are unique
"""

from typing import Dict, FrozenSet, Tuple

from namedchains.types import ChecksumAddress, InternalId


ETHERSCAN_API_KEY = "ETHERSCAN_API_KEY"
BLOCKSCOUT_API_KEY = "BLOCKSCOUT_API_KEY"
ROUTESCAN_API_KEY = "ROUTESCAN_API_KEY"


def _etherscan_v2(chain_id: int) -> str:
    """Etherscan multichain API endpoint"""
    return f"https://api.etherscan.io/v2/api?chainid={chain_id}"


def _blockscout(base_url: str, api_path: str = "/api") -> Tuple[str, str]:
    """Blockscout style explorers serve their API under the same host"""
    return f"{base_url}{api_path}", base_url


#: Chain metadata rows in declaration order
CHAIN_DATA: Tuple[dict, ...] = (
    #
    # Ethereum
    #
    {
        "internal_id": "Mainnet",
        "chain_id": 1,
        "name": "mainnet",
        "aliases": ("ethlive",),
        "blocktime": 12_000,
        "currency": "ETH",
        "explorer": (_etherscan_v2(1), "https://etherscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {"internal_id": "Morden", "chain_id": 2, "name": "morden", "currency": "ETH", "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "Ropsten", "chain_id": 3, "name": "ropsten", "currency": "ETH", "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "Rinkeby", "chain_id": 4, "name": "rinkeby", "currency": "ETH", "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "Goerli", "chain_id": 5, "name": "goerli", "currency": "ETH", "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "Kovan", "chain_id": 42, "name": "kovan", "currency": "ETH", "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "Holesky",
        "chain_id": 17000,
        "name": "holesky",
        "currency": "ETH",
        "explorer": (_etherscan_v2(17000), "https://holesky.etherscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {
        "internal_id": "Hoodi",
        "chain_id": 560048,
        "name": "hoodi",
        "explorer": (_etherscan_v2(560048), "https://hoodi.etherscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {
        "internal_id": "Sepolia",
        "chain_id": 11155111,
        "name": "sepolia",
        "currency": "ETH",
        "explorer": (_etherscan_v2(11155111), "https://sepolia.etherscan.io"),
    },
    {
        "internal_id": "Odyssey",
        "chain_id": 911867,
        "name": "odyssey",
        "blocktime": 1_000,
        "explorer": _blockscout("https://odyssey-explorer.ithaca.xyz"),
    },

    #
    # Optimism
    #
    {
        "internal_id": "Optimism",
        "chain_id": 10,
        "name": "optimism",
        "blocktime": 2_000,
        "currency": "ETH",
        "explorer": (_etherscan_v2(10), "https://optimistic.etherscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {"internal_id": "OptimismKovan", "chain_id": 69, "name": "optimism-kovan", "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "OptimismGoerli", "chain_id": 420, "name": "optimism-goerli", "blocktime": 2_000, "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "OptimismSepolia",
        "chain_id": 11155420,
        "name": "optimism-sepolia",
        "blocktime": 2_000,
        "currency": "ETH",
        "explorer": (_etherscan_v2(11155420), "https://sepolia-optimism.etherscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # BOB
    #
    {"internal_id": "Bob", "chain_id": 60808, "name": "bob", "blocktime": 2_000, "explorer": _blockscout("https://explorer.gobob.xyz")},
    {"internal_id": "BobSepolia", "chain_id": 808813, "name": "bob-sepolia", "blocktime": 2_000, "explorer": _blockscout("https://bob-sepolia.explorer.gobob.xyz")},

    #
    # Arbitrum
    #
    {
        "internal_id": "Arbitrum",
        "chain_id": 42161,
        "name": "arbitrum",
        "aliases": ("arbitrum_one", "arbitrum-one"),
        "blocktime": 260,
        "explorer": (_etherscan_v2(42161), "https://arbiscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {"internal_id": "ArbitrumTestnet", "chain_id": 421611, "name": "arbitrum-testnet", "blocktime": 260, "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "ArbitrumGoerli", "chain_id": 421613, "name": "arbitrum-goerli", "blocktime": 260, "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "ArbitrumSepolia",
        "chain_id": 421614,
        "name": "arbitrum-sepolia",
        "blocktime": 260,
        "explorer": (_etherscan_v2(421614), "https://sepolia.arbiscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {
        "internal_id": "ArbitrumNova",
        "chain_id": 42170,
        "name": "arbitrum-nova",
        "blocktime": 260,
        "explorer": (_etherscan_v2(42170), "https://nova.arbiscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # Cronos
    #
    {"internal_id": "Cronos", "chain_id": 25, "name": "cronos", "blocktime": 5_700, "explorer": (_etherscan_v2(25), "https://cronoscan.com"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "CronosTestnet", "chain_id": 338, "name": "cronos-testnet", "blocktime": 5_700, "api_key_name": ETHERSCAN_API_KEY},

    #
    # Rootstock
    #
    {"internal_id": "Rsk", "chain_id": 30, "name": "rsk", "blocktime": 25_000, "currency": "RBTC", "explorer": _blockscout("https://blockscout.com/rsk/mainnet")},
    {"internal_id": "RskTestnet", "chain_id": 31, "name": "rsk-testnet", "blocktime": 25_000, "currency": "tRBTC", "explorer": _blockscout("https://rootstock-testnet.blockscout.com")},

    #
    # Telos
    #
    {
        "internal_id": "TelosEvm",
        "chain_id": 40,
        "name": "telos",
        "blocktime": 500,
        "currency": "TLOS",
        "explorer": ("https://api.teloscan.io/api", "https://teloscan.io"),
    },
    {
        "internal_id": "TelosEvmTestnet",
        "chain_id": 41,
        "name": "telos-testnet",
        "aliases": ("telos_testnet", "telos-evm-testnet"),
        "blocktime": 500,
        "currency": "TLOS",
        "explorer": ("https://api.testnet.teloscan.io/api", "https://testnet.teloscan.io"),
    },

    #
    # Darwinia
    #
    {"internal_id": "Crab", "chain_id": 44, "name": "crab", "blocktime": 6_000, "currency": "CRAB", "explorer": _blockscout("https://crab-scan.darwinia.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "Darwinia", "chain_id": 46, "name": "darwinia", "blocktime": 6_000, "currency": "RING", "explorer": _blockscout("https://explorer.darwinia.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "Koi", "chain_id": 701, "name": "koi", "blocktime": 6_000, "currency": "KRING", "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # BNB Smart Chain
    #
    # The correct name is BNB Smart Chain since the rebranding,
    # we keep `bsc` as the canonical name for backwards compatibility.
    #
    {
        "internal_id": "BinanceSmartChain",
        "chain_id": 56,
        "name": "bsc",
        "aliases": ("binance-smart-chain", "bnb-smart-chain"),
        "blocktime": 750,
        "currency": "BNB",
        "explorer": (_etherscan_v2(56), "https://bscscan.com"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {
        "internal_id": "BinanceSmartChainTestnet",
        "chain_id": 97,
        "name": "bsc-testnet",
        "aliases": ("bsc_testnet", "binance-smart-chain-testnet", "bnb-smart-chain-testnet"),
        "blocktime": 750,
        "currency": "BNB",
        "explorer": (_etherscan_v2(97), "https://testnet.bscscan.com"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    {"internal_id": "Poa", "chain_id": 99, "name": "poa"},
    {"internal_id": "Sokol", "chain_id": 77, "name": "sokol"},

    #
    # Scroll
    #
    {"internal_id": "Scroll", "chain_id": 534352, "name": "scroll", "blocktime": 3_000, "currency": "ETH", "explorer": (_etherscan_v2(534352), "https://scrollscan.com"), "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "ScrollSepolia",
        "chain_id": 534351,
        "name": "scroll-sepolia",
        "aliases": ("scroll_sepolia_testnet",),
        "blocktime": 3_000,
        "currency": "ETH",
        "explorer": (_etherscan_v2(534351), "https://sepolia.scrollscan.com"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    {
        "internal_id": "Metis",
        "chain_id": 1088,
        "name": "metis",
        "explorer": ("https://api.routescan.io/v2/network/mainnet/evm/1088/etherscan", "https://explorer.metis.io"),
    },

    #
    # Conflux eSpace
    #
    {
        "internal_id": "CfxTestnet",
        "chain_id": 71,
        "name": "cfx-testnet",
        "aliases": ("conflux-espace-testnet",),
        "blocktime": 500,
        "currency": "CFX",
        "explorer": ("https://evmapi-testnet.confluxscan.net/api", "https://evmtestnet.confluxscan.io"),
    },
    {
        "internal_id": "Cfx",
        "chain_id": 1030,
        "name": "cfx",
        "aliases": ("conflux-espace",),
        "blocktime": 500,
        "currency": "CFX",
        "explorer": ("https://evmapi.confluxscan.net/api", "https://evm.confluxscan.io"),
    },

    {
        "internal_id": "Gnosis",
        "chain_id": 100,
        "name": "xdai",
        "aliases": ("gnosis", "gnosis-chain"),
        "blocktime": 5_000,
        "explorer": (_etherscan_v2(100), "https://gnosisscan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # Polygon
    #
    {"internal_id": "Polygon", "chain_id": 137, "name": "polygon", "blocktime": 2_100, "currency": "POL", "explorer": (_etherscan_v2(137), "https://polygonscan.com"), "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "PolygonAmoy",
        "chain_id": 80002,
        "name": "amoy",
        "aliases": ("polygon-amoy",),
        "blocktime": 2_100,
        "currency": "POL",
        "explorer": (_etherscan_v2(80002), "https://amoy.polygonscan.com"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # Fantom
    #
    {"internal_id": "Fantom", "chain_id": 250, "name": "fantom", "blocktime": 1_200, "api_key_name": "FTMSCAN_API_KEY"},
    {"internal_id": "FantomTestnet", "chain_id": 4002, "name": "fantom-testnet", "blocktime": 1_200, "api_key_name": "FTMSCAN_API_KEY"},

    #
    # Moonbeam
    #
    {"internal_id": "Moonbeam", "chain_id": 1284, "name": "moonbeam", "blocktime": 6_500, "explorer": (_etherscan_v2(1284), "https://moonbeam.moonscan.io"), "api_key_name": "MOONSCAN_API_KEY"},
    {"internal_id": "MoonbeamDev", "chain_id": 1281, "name": "moonbeam-dev", "api_key_name": "MOONSCAN_API_KEY"},
    {"internal_id": "Moonriver", "chain_id": 1285, "name": "moonriver", "blocktime": 6_500, "explorer": (_etherscan_v2(1285), "https://moonriver.moonscan.io"), "api_key_name": "MOONSCAN_API_KEY"},
    {"internal_id": "Moonbase", "chain_id": 1287, "name": "moonbase", "explorer": (_etherscan_v2(1287), "https://moonbase.moonscan.io"), "api_key_name": "MOONSCAN_API_KEY"},

    #
    # Local development chains
    #
    {"internal_id": "Dev", "chain_id": 1337, "name": "dev", "blocktime": 200},
    {"internal_id": "AnvilHardhat", "chain_id": 31337, "name": "anvil-hardhat", "aliases": ("anvil", "hardhat"), "blocktime": 200},

    #
    # Gravity
    #
    {"internal_id": "GravityAlphaMainnet", "chain_id": 1625, "name": "gravity-alpha-mainnet", "blocktime": 260, "currency": "G", "explorer": _blockscout("https://explorer.gravity.xyz")},
    {"internal_id": "GravityAlphaTestnetSepolia", "chain_id": 13505, "name": "gravity-alpha-testnet-sepolia", "blocktime": 260, "currency": "G", "explorer": _blockscout("https://explorer-sepolia.gravity.xyz")},

    {"internal_id": "Evmos", "chain_id": 9001, "name": "evmos", "blocktime": 1_900},
    {"internal_id": "EvmosTestnet", "chain_id": 9000, "name": "evmos-testnet", "blocktime": 1_900},

    {
        "internal_id": "Plasma",
        "chain_id": 9745,
        "name": "plasma",
        "blocktime": 1_000,
        "currency": "XPL",
        "explorer": ("https://api.routescan.io/v2/network/mainnet/evm/9745/etherscan/api", "https://plasmascan.to"),
        "api_key_name": ROUTESCAN_API_KEY,
    },

    {"internal_id": "Chiado", "chain_id": 10200, "name": "chiado", "blocktime": 5_000, "explorer": _blockscout("https://gnosis-chiado.blockscout.com")},

    #
    # Oasis
    #
    {"internal_id": "Oasis", "chain_id": 26863, "name": "oasis", "blocktime": 5_500},
    {"internal_id": "Emerald", "chain_id": 42262, "name": "emerald", "blocktime": 6_000, "explorer": _blockscout("https://explorer.emerald.oasis.dev")},
    {"internal_id": "EmeraldTestnet", "chain_id": 42261, "name": "emerald-testnet", "explorer": _blockscout("https://testnet.explorer.emerald.oasis.dev")},

    #
    # Filecoin
    #
    {"internal_id": "FilecoinMainnet", "chain_id": 314, "name": "filecoin-mainnet", "blocktime": 30_000},
    {
        "internal_id": "FilecoinCalibrationTestnet",
        "chain_id": 314159,
        "name": "filecoin-calibration-testnet",
        "blocktime": 30_000,
        "explorer": ("https://api.calibration.node.glif.io/rpc/v1", "https://calibration.filfox.info/en"),
    },

    #
    # Avalanche
    #
    {"internal_id": "Avalanche", "chain_id": 43114, "name": "avalanche", "blocktime": 2_000, "explorer": (_etherscan_v2(43114), "https://snowscan.xyz"), "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "AvalancheFuji",
        "chain_id": 43113,
        "name": "fuji",
        "aliases": ("avalanche-fuji",),
        "blocktime": 2_000,
        "explorer": (_etherscan_v2(43113), "https://testnet.snowscan.xyz"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # Celo
    #
    {"internal_id": "Celo", "chain_id": 42220, "name": "celo", "blocktime": 1_000, "currency": "CELO", "explorer": (_etherscan_v2(42220), "https://celoscan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "CeloSepolia", "chain_id": 11142220, "name": "celo-sepolia", "blocktime": 1_000, "currency": "CELO", "explorer": (_etherscan_v2(11142220), "https://sepolia.celoscan.io"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Aurora
    #
    {"internal_id": "Aurora", "chain_id": 1313161554, "name": "aurora", "blocktime": 1_100, "explorer": ("https://api.aurorascan.dev/api", "https://aurorascan.dev"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "AuroraTestnet", "chain_id": 1313161555, "name": "aurora-testnet", "blocktime": 1_100, "explorer": _blockscout("https://testnet.aurorascan.dev"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Canto
    #
    {"internal_id": "Canto", "chain_id": 7700, "name": "canto", "blocktime": 5_700, "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "CantoTestnet", "chain_id": 740, "name": "canto-testnet", "blocktime": 5_700, "api_key_name": BLOCKSCOUT_API_KEY},

    {"internal_id": "Boba", "chain_id": 288, "name": "boba", "explorer": ("https://api.bobascan.com/api", "https://bobascan.com"), "api_key_name": "BOBASCAN_API_KEY"},

    #
    # Base
    #
    {"internal_id": "Base", "chain_id": 8453, "name": "base", "blocktime": 2_000, "currency": "ETH", "explorer": (_etherscan_v2(8453), "https://basescan.org"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "BaseGoerli", "chain_id": 84531, "name": "base-goerli", "blocktime": 2_000, "currency": "ETH", "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "BaseSepolia", "chain_id": 84532, "name": "base-sepolia", "blocktime": 2_000, "currency": "ETH", "explorer": (_etherscan_v2(84532), "https://sepolia.basescan.org"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Syndr
    #
    {"internal_id": "Syndr", "chain_id": 404, "name": "syndr", "blocktime": 260, "explorer": _blockscout("https://explorer.syndr.com"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "SyndrSepolia", "chain_id": 444444, "name": "syndr-sepolia", "blocktime": 260, "explorer": _blockscout("https://sepolia-explorer.syndr.com"), "api_key_name": ETHERSCAN_API_KEY},

    {"internal_id": "Shimmer", "chain_id": 148, "name": "shimmer", "blocktime": 5_000, "currency": "SMR", "explorer": _blockscout("https://explorer.evm.shimmer.network"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Ink
    #
    {"internal_id": "Ink", "chain_id": 57073, "name": "ink", "blocktime": 1_000, "explorer": _blockscout("https://explorer.inkonchain.com", "/api/v2"), "api_key_name": BLOCKSCOUT_API_KEY},
    {
        "internal_id": "InkSepolia",
        "chain_id": 763373,
        "name": "ink-sepolia",
        "aliases": ("ink_sepolia_testnet",),
        "blocktime": 1_000,
        "explorer": _blockscout("https://explorer-sepolia.inkonchain.com", "/api/v2"),
        "api_key_name": BLOCKSCOUT_API_KEY,
    },

    #
    # Fraxtal
    #
    {"internal_id": "Fraxtal", "chain_id": 252, "name": "fraxtal", "blocktime": 2_000, "explorer": (_etherscan_v2(252), "https://fraxscan.com"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "FraxtalTestnet", "chain_id": 2522, "name": "fraxtal-testnet", "blocktime": 2_000, "explorer": (_etherscan_v2(2522), "https://holesky.fraxscan.com"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Blast
    #
    {"internal_id": "Blast", "chain_id": 81457, "name": "blast", "blocktime": 2_000, "explorer": (_etherscan_v2(81457), "https://blastscan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "BlastSepolia", "chain_id": 168587773, "name": "blast-sepolia", "blocktime": 2_000, "explorer": (_etherscan_v2(168587773), "https://sepolia.blastscan.io"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Linea
    #
    {"internal_id": "Linea", "chain_id": 59144, "name": "linea", "explorer": (_etherscan_v2(59144), "https://lineascan.build"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "LineaGoerli", "chain_id": 59140, "name": "linea-goerli"},
    {"internal_id": "LineaSepolia", "chain_id": 59141, "name": "linea-sepolia", "explorer": (_etherscan_v2(59141), "https://sepolia.lineascan.build"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # ZKsync
    #
    {"internal_id": "ZkSync", "chain_id": 324, "name": "zksync", "blocktime": 1_000, "currency": "ETH", "explorer": (_etherscan_v2(324), "https://era.zksync.network"), "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "ZkSyncTestnet",
        "chain_id": 300,
        "name": "zksync-testnet",
        "aliases": ("zksync_testnet",),
        "blocktime": 1_000,
        "currency": "ETH",
        "explorer": (_etherscan_v2(300), "https://sepolia-era.zksync.network"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # Mantle
    #
    {"internal_id": "Mantle", "chain_id": 5000, "name": "mantle", "blocktime": 2_000, "currency": "MNT", "explorer": (_etherscan_v2(5000), "https://mantlescan.xyz"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "MantleSepolia", "chain_id": 5003, "name": "mantle-sepolia", "blocktime": 2_000, "currency": "MNT", "explorer": (_etherscan_v2(5003), "https://sepolia.mantlescan.xyz"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Xai
    #
    {"internal_id": "Xai", "chain_id": 660279, "name": "xai", "blocktime": 260, "currency": "XAI", "explorer": (_etherscan_v2(660279), "https://xaiscan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "XaiSepolia", "chain_id": 37714555429, "name": "xai-sepolia", "blocktime": 260, "currency": "XAI", "explorer": (_etherscan_v2(37714555429), "https://sepolia.xaiscan.io"), "api_key_name": ETHERSCAN_API_KEY},

    {"internal_id": "HappychainTestnet", "chain_id": 216, "name": "happychain-testnet", "blocktime": 2_000, "currency": "HAPPY", "explorer": _blockscout("https://explorer.testnet.happy.tech")},

    {"internal_id": "Viction", "chain_id": 88, "name": "viction", "blocktime": 2_000, "explorer": _blockscout("https://www.vicscan.xyz")},

    # Zora Sepolia is not registered: its chain id 999999999
    # is used as the canonical example of an unnamed chain
    {"internal_id": "Zora", "chain_id": 7777777, "name": "zora", "blocktime": 2_000, "explorer": _blockscout("https://explorer.zora.energy"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # PGN
    #
    {"internal_id": "Pgn", "chain_id": 424, "name": "pgn", "blocktime": 2_000, "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "PgnSepolia", "chain_id": 58008, "name": "pgn-sepolia", "blocktime": 2_000, "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Mode
    #
    {"internal_id": "Mode", "chain_id": 34443, "name": "mode", "blocktime": 2_000, "explorer": _blockscout("https://explorer.mode.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "ModeSepolia", "chain_id": 919, "name": "mode-sepolia", "blocktime": 2_000, "explorer": _blockscout("https://sepolia.explorer.mode.network"), "api_key_name": BLOCKSCOUT_API_KEY},

    {"internal_id": "Elastos", "chain_id": 20, "name": "elastos", "blocktime": 5_000, "explorer": _blockscout("https://esc.elastos.io")},

    #
    # Etherlink
    #
    {"internal_id": "Etherlink", "chain_id": 42793, "name": "etherlink", "blocktime": 5_000, "currency": "XTZ", "explorer": _blockscout("https://explorer.etherlink.com"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "EtherlinkTestnet", "chain_id": 128123, "name": "etherlink-testnet", "blocktime": 5_000, "currency": "XTZ", "explorer": _blockscout("https://testnet.explorer.etherlink.com"), "api_key_name": BLOCKSCOUT_API_KEY},

    {"internal_id": "Degen", "chain_id": 666666666, "name": "degen", "blocktime": 600, "currency": "DEGEN", "explorer": _blockscout("https://explorer.degen.tips")},

    #
    # opBNB
    #
    {
        "internal_id": "OpBNBMainnet",
        "chain_id": 204,
        "name": "opbnb-mainnet",
        "aliases": ("op-bnb-mainnet",),
        "blocktime": 1_000,
        "currency": "BNB",
        "explorer": (_etherscan_v2(204), "https://opbnb.bscscan.com"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {
        "internal_id": "OpBNBTestnet",
        "chain_id": 5611,
        "name": "opbnb-testnet",
        "aliases": ("op-bnb-testnet",),
        "blocktime": 1_000,
        "currency": "BNB",
        "explorer": (_etherscan_v2(5611), "https://opbnb-testnet.bscscan.com"),
        "api_key_name": ETHERSCAN_API_KEY,
    },

    #
    # Ronin
    #
    {"internal_id": "Ronin", "chain_id": 2020, "name": "ronin", "blocktime": 3_000, "currency": "RON", "explorer": ("https://skynet-api.roninchain.com/ronin", "https://app.roninchain.com")},
    {"internal_id": "RoninTestnet", "chain_id": 2021, "name": "ronin-testnet", "blocktime": 3_000, "currency": "RON", "explorer": ("https://api-gateway.skymavis.com/rpc/testnet", "https://saigon-app.roninchain.com")},

    #
    # Taiko
    #
    {"internal_id": "Taiko", "chain_id": 167000, "name": "taiko", "blocktime": 12_000, "currency": "ETH", "explorer": (_etherscan_v2(167000), "https://taikoscan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "TaikoHekla", "chain_id": 167009, "name": "taiko-hekla", "blocktime": 12_000, "currency": "ETH", "explorer": (_etherscan_v2(167009), "https://hekla.taikoscan.io"), "api_key_name": ETHERSCAN_API_KEY},

    {"internal_id": "AutonomysNovaTestnet", "chain_id": 490000, "name": "autonomys-nova-testnet", "blocktime": 1_000},

    #
    # Flare
    #
    {"internal_id": "Flare", "chain_id": 14, "name": "flare", "blocktime": 1_800, "currency": "FLR", "explorer": _blockscout("https://flare-explorer.flare.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "FlareCoston2", "chain_id": 114, "name": "flare-coston2", "blocktime": 2_500, "currency": "C2FLR", "explorer": _blockscout("https://coston2-explorer.flare.network"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Acala and Karura
    #
    {"internal_id": "Acala", "chain_id": 787, "name": "acala", "blocktime": 12_500, "explorer": _blockscout("https://blockscout.acala.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "AcalaMandalaTestnet", "chain_id": 595, "name": "acala-mandala-testnet", "blocktime": 12_500, "explorer": _blockscout("https://blockscout.mandala.aca-staging.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "AcalaTestnet", "chain_id": 597, "name": "acala-testnet", "blocktime": 12_500, "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "Karura", "chain_id": 686, "name": "karura", "blocktime": 12_500, "explorer": _blockscout("https://blockscout.karura.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "KaruraTestnet", "chain_id": 596, "name": "karura-testnet", "blocktime": 12_500, "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # PulseChain
    #
    {"internal_id": "Pulsechain", "chain_id": 369, "name": "pulsechain", "blocktime": 10_000, "currency": "PLS", "explorer": ("https://api.scan.pulsechain.com", "https://scan.pulsechain.com")},
    {
        "internal_id": "PulsechainTestnet",
        "chain_id": 943,
        "name": "pulsechain-testnet",
        "blocktime": 10_101,
        "currency": "PLS",
        "explorer": ("https://api.scan.v4.testnet.pulsechain.com", "https://scan.v4.testnet.pulsechain.com"),
    },

    {"internal_id": "Cannon", "chain_id": 13370, "name": "cannon"},

    #
    # Immutable
    #
    {"internal_id": "Immutable", "chain_id": 13371, "name": "immutable", "blocktime": 2_000, "currency": "IMX", "explorer": _blockscout("https://explorer.immutable.com"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "ImmutableTestnet", "chain_id": 13473, "name": "immutable-testnet", "blocktime": 2_000, "currency": "tIMX", "explorer": _blockscout("https://explorer.testnet.immutable.com"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Soneium
    #
    {"internal_id": "Soneium", "chain_id": 1868, "name": "soneium", "blocktime": 2_000, "explorer": _blockscout("https://soneium.blockscout.com"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "SoneiumMinatoTestnet", "chain_id": 1946, "name": "soneium-minato-testnet", "blocktime": 2_000, "explorer": _blockscout("https://soneium-minato.blockscout.com"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # World Chain
    #
    {
        "internal_id": "World",
        "chain_id": 480,
        "name": "world",
        "aliases": ("worldchain",),
        "blocktime": 2_000,
        "currency": "WRLD",
        "explorer": (_etherscan_v2(480), "https://worldscan.org"),
        "api_key_name": BLOCKSCOUT_API_KEY,
    },
    {
        "internal_id": "WorldSepolia",
        "chain_id": 4801,
        "name": "world-sepolia",
        "aliases": ("worldchain-sepolia",),
        "blocktime": 2_000,
        "currency": "WRLD",
        "explorer": (_etherscan_v2(4801), "https://sepolia.worldscan.org"),
        "api_key_name": BLOCKSCOUT_API_KEY,
    },

    {"internal_id": "Iotex", "chain_id": 4689, "name": "iotex", "blocktime": 5_000, "currency": "IOTX"},
    {"internal_id": "Core", "chain_id": 1116, "name": "core", "blocktime": 3_000, "currency": "CORE", "explorer": ("https://openapi.coredao.org/api", "https://scan.coredao.org"), "api_key_name": "CORESCAN_API_KEY"},
    {"internal_id": "Merlin", "chain_id": 4200, "name": "merlin", "blocktime": 3_000, "currency": "BTC", "explorer": _blockscout("https://scan.merlinchain.io"), "api_key_name": "MERLINSCAN_API_KEY"},
    {"internal_id": "Bitlayer", "chain_id": 200901, "name": "bitlayer", "blocktime": 3_000, "currency": "BTC", "explorer": ("https://api.btrscan.com/scan/api", "https://www.btrscan.com"), "api_key_name": "BITLAYERSCAN_API_KEY"},
    {"internal_id": "Vana", "chain_id": 1480, "name": "vana", "blocktime": 6_000, "currency": "VANA", "explorer": ("https://api.vanascan.io/api", "https://vanascan.io"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "Zeta", "chain_id": 7000, "name": "zeta", "blocktime": 6_000, "currency": "ZETA", "explorer": _blockscout("https://zetachain.blockscout.com"), "api_key_name": "ZETASCAN_API_KEY"},
    {"internal_id": "Kaia", "chain_id": 8217, "name": "kaia", "blocktime": 1_000, "currency": "KAIA", "explorer": ("https://mainnet-oapi.kaiascan.io/api", "https://kaiascan.io"), "api_key_name": "KAIASCAN_API_KEY"},
    {"internal_id": "Story", "chain_id": 1514, "name": "story", "blocktime": 2_500, "currency": "IP", "explorer": _blockscout("https://www.storyscan.xyz", "/api/v2"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Sei
    #
    {"internal_id": "Sei", "chain_id": 1329, "name": "sei", "blocktime": 500, "currency": "SEI", "explorer": (_etherscan_v2(1329), "https://seiscan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "SeiTestnet", "chain_id": 1328, "name": "sei-testnet", "blocktime": 500, "currency": "SEI", "explorer": (_etherscan_v2(1328), "https://testnet.seiscan.io"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Stable
    #
    {"internal_id": "StableMainnet", "chain_id": 988, "name": "stable-mainnet", "blocktime": 700, "currency": "gUSDT", "explorer": (_etherscan_v2(988), "https://stablescan.xyz"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "StableTestnet", "chain_id": 2201, "name": "stable-testnet", "blocktime": 700, "currency": "gUSDT", "explorer": (_etherscan_v2(2201), "https://testnet.stablescan.xyz"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Unichain
    #
    {"internal_id": "Unichain", "chain_id": 130, "name": "unichain", "blocktime": 1_000, "currency": "ETH", "explorer": (_etherscan_v2(130), "https://uniscan.xyz"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "UnichainSepolia", "chain_id": 1301, "name": "unichain-sepolia", "blocktime": 1_000, "currency": "ETH", "explorer": (_etherscan_v2(1301), "https://sepolia.uniscan.xyz"), "api_key_name": ETHERSCAN_API_KEY},

    {"internal_id": "SignetPecorino", "chain_id": 14174, "name": "signet-pecorino", "blocktime": 12_000, "currency": "USDS", "explorer": _blockscout("https://explorer.pecorino.signet.sh"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # ApeChain
    #
    {"internal_id": "ApeChain", "chain_id": 33139, "name": "apechain", "blocktime": 260, "currency": "APE", "explorer": (_etherscan_v2(33139), "https://apescan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "Curtis",
        "chain_id": 33111,
        "name": "curtis",
        "aliases": ("apechain-testnet",),
        "blocktime": 260,
        "currency": "APE",
        "explorer": (_etherscan_v2(33111), "https://curtis.apescan.io"),
        "api_key_name": BLOCKSCOUT_API_KEY,
    },

    #
    # Sonic
    #
    {"internal_id": "Sonic", "chain_id": 146, "name": "sonic", "blocktime": 1_000, "currency": "S", "explorer": (_etherscan_v2(146), "https://sonicscan.org"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "SonicTestnet", "chain_id": 14601, "name": "sonic-testnet", "blocktime": 1_000, "currency": "S", "explorer": (_etherscan_v2(14601), "https://testnet.sonicscan.org"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Treasure
    #
    {"internal_id": "Treasure", "chain_id": 61166, "name": "treasure", "currency": "MAGIC"},
    {"internal_id": "TreasureTopaz", "chain_id": 978658, "name": "treasure-topaz", "aliases": ("treasure-topaz-testnet",), "currency": "MAGIC"},

    #
    # Berachain
    #
    {
        "internal_id": "BerachainBepolia",
        "chain_id": 80069,
        "name": "berachain-bepolia",
        "aliases": ("berachain-bepolia-testnet",),
        "blocktime": 2_000,
        "currency": "BERA",
        "explorer": (_etherscan_v2(80069), "https://testnet.berascan.com"),
        "api_key_name": "BERASCAN_API_KEY",
    },
    {"internal_id": "Berachain", "chain_id": 80094, "name": "berachain", "blocktime": 2_000, "currency": "BERA", "explorer": (_etherscan_v2(80094), "https://berascan.com"), "api_key_name": "BERASCAN_API_KEY"},

    #
    # Superposition
    #
    {"internal_id": "SuperpositionTestnet", "chain_id": 98985, "name": "superposition-testnet", "blocktime": 260, "currency": "ETH", "explorer": _blockscout("https://testnet-explorer.superposition.so"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "Superposition", "chain_id": 55244, "name": "superposition", "blocktime": 260, "currency": "ETH", "explorer": _blockscout("https://explorer.superposition.so"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Monad
    #
    {"internal_id": "Monad", "chain_id": 143, "name": "monad", "blocktime": 400, "currency": "MON", "explorer": (_etherscan_v2(143), "https://monadscan.com"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "MonadTestnet", "chain_id": 10143, "name": "monad-testnet", "blocktime": 400, "currency": "MON", "explorer": (_etherscan_v2(10143), "https://testnet.monadscan.com"), "api_key_name": ETHERSCAN_API_KEY},

    {"internal_id": "Hyperliquid", "chain_id": 999, "name": "hyperliquid", "blocktime": 2_000, "currency": "HYPE", "explorer": (_etherscan_v2(999), "https://hyperevmscan.io"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Abstract
    #
    {"internal_id": "Abstract", "chain_id": 2741, "name": "abstract", "blocktime": 1_000, "currency": "ETH", "explorer": (_etherscan_v2(2741), "https://abscan.org"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "AbstractTestnet", "chain_id": 11124, "name": "abstract-testnet", "blocktime": 1_000, "explorer": (_etherscan_v2(11124), "https://sepolia.abscan.org"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # Corn
    #
    {
        "internal_id": "Corn",
        "chain_id": 21000000,
        "name": "corn",
        "currency": "BTCN",
        "explorer": ("https://api.routescan.io/v2/network/mainnet/evm/21000000/etherscan/api", "https://cornscan.io"),
        "api_key_name": ROUTESCAN_API_KEY,
    },
    {
        "internal_id": "CornTestnet",
        "chain_id": 21000001,
        "name": "corn-testnet",
        "currency": "BTCN",
        "explorer": ("https://api.routescan.io/v2/network/testnet/evm/21000001/etherscan/api", "https://testnet.cornscan.io"),
        "api_key_name": ROUTESCAN_API_KEY,
    },

    #
    # Sophon
    #
    {"internal_id": "Sophon", "chain_id": 50104, "name": "sophon", "blocktime": 1_000, "currency": "SOPH", "explorer": (_etherscan_v2(50104), "https://sophscan.xyz"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "SophonTestnet", "chain_id": 531050104, "name": "sophon-testnet", "blocktime": 1_000, "currency": "SOPH", "explorer": (_etherscan_v2(531050104), "https://testnet.sophscan.xyz"), "api_key_name": ETHERSCAN_API_KEY},

    {"internal_id": "PolkadotTestnet", "chain_id": 420420417, "name": "polkadot-testnet"},

    #
    # Lens
    #
    {"internal_id": "Lens", "chain_id": 232, "name": "lens", "blocktime": 1_000, "currency": "GHO", "explorer": ("https://explorer-api.lens.xyz", "https://explorer.lens.xyz")},
    {"internal_id": "LensTestnet", "chain_id": 37111, "name": "lens-testnet", "blocktime": 1_000, "currency": "GRASS", "explorer": ("https://block-explorer-api.staging.lens.zksync.dev", "https://explorer.testnet.lens.xyz")},

    #
    # Injective
    #
    {"internal_id": "Injective", "chain_id": 1776, "name": "injective", "blocktime": 700, "currency": "INJ", "explorer": ("https://blockscout-api.injective.network/api", "https://blockscout.injective.network"), "api_key_name": BLOCKSCOUT_API_KEY},
    {
        "internal_id": "InjectiveTestnet",
        "chain_id": 1439,
        "name": "injective-testnet",
        "blocktime": 700,
        "currency": "INJ",
        "explorer": ("https://testnet.blockscout-api.injective.network/api", "https://testnet.blockscout.injective.network"),
        "api_key_name": BLOCKSCOUT_API_KEY,
    },

    {"internal_id": "Katana", "chain_id": 747474, "name": "katana", "blocktime": 1_000, "currency": "ETH", "explorer": (_etherscan_v2(747474), "https://katanascan.com"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "Lisk", "chain_id": 1135, "name": "lisk", "blocktime": 2_000, "currency": "ETH", "explorer": _blockscout("https://blockscout.lisk.com"), "api_key_name": BLOCKSCOUT_API_KEY},
    {"internal_id": "Fuse", "chain_id": 122, "name": "fuse", "blocktime": 5_000, "explorer": _blockscout("https://explorer.fuse.io"), "api_key_name": BLOCKSCOUT_API_KEY},

    #
    # Fluent
    #
    {"internal_id": "FluentDevnet", "chain_id": 20993, "name": "fluent-devnet", "blocktime": 3_000, "explorer": _blockscout("https://blockscout.dev.gblend.xyz")},
    {"internal_id": "FluentTestnet", "chain_id": 20994, "name": "fluent-testnet", "blocktime": 1_000, "explorer": _blockscout("https://testnet.fluentscan.xyz")},

    #
    # SKALE
    #
    {"internal_id": "SkaleBase", "chain_id": 1562508942, "name": "skale-base", "blocktime": 10_000, "explorer": _blockscout("https://skale-base-explorer.skalenodes.com"), "api_key_name": ETHERSCAN_API_KEY},
    {"internal_id": "SkaleBaseTestnet", "chain_id": 324705682, "name": "skale-base-testnet", "blocktime": 10_000, "explorer": _blockscout("https://base-sepolia-testnet-explorer.skalenodes.com"), "api_key_name": ETHERSCAN_API_KEY},

    #
    # MemeCore
    #
    {"internal_id": "MemeCore", "chain_id": 4352, "name": "memecore", "blocktime": 7_000, "currency": "M", "explorer": (_etherscan_v2(4352), "https://memecorescan.io"), "api_key_name": ETHERSCAN_API_KEY},
    {
        "internal_id": "Formicarium",
        "chain_id": 43521,
        "name": "formicarium",
        # formicairum is a misspelling we have accepted in the past
        "aliases": ("memecore-formicarium", "formicairum"),
        "blocktime": 7_000,
        "currency": "tM",
        "explorer": (_etherscan_v2(43521), "https://formicarium.memecorescan.io"),
        "api_key_name": ETHERSCAN_API_KEY,
    },
    {
        "internal_id": "Insectarium",
        "chain_id": 43522,
        "name": "insectarium",
        "aliases": ("memecore-insectarium",),
        "blocktime": 7_000,
        "currency": "tM",
        "explorer": _blockscout("https://insectarium.blockscout.memecore.com"),
    },
)


#: Chains without EIP-1559 fee market support
LEGACY_CHAINS: FrozenSet[InternalId] = frozenset({
    "Elastos",
    "Emerald",
    "EmeraldTestnet",
    "Fantom",
    "FantomTestnet",
    "OptimismKovan",
    "Ronin",
    "RoninTestnet",
    "Rsk",
    "RskTestnet",
    "Shimmer",
    "Treasure",
    "TreasureTopaz",
    "Viction",
    "Sophon",
    "SophonTestnet",
})


#: Testnets and local development chains
TESTNET_CHAINS: FrozenSet[InternalId] = frozenset({
    # Ethereum testnets
    "Goerli", "Holesky", "Kovan", "Sepolia", "Morden", "Ropsten", "Rinkeby", "Hoodi",

    # Other testnets
    "ArbitrumGoerli", "ArbitrumSepolia", "ArbitrumTestnet", "SyndrSepolia", "AuroraTestnet",
    "AvalancheFuji", "Odyssey", "BaseGoerli", "BaseSepolia", "BlastSepolia",
    "BinanceSmartChainTestnet", "CantoTestnet", "CronosTestnet", "CeloSepolia", "EmeraldTestnet",
    "EvmosTestnet", "FantomTestnet", "FilecoinCalibrationTestnet", "FraxtalTestnet",
    "HappychainTestnet", "LineaGoerli", "LineaSepolia", "InkSepolia", "MantleSepolia",
    "MoonbeamDev", "OptimismGoerli", "OptimismKovan", "OptimismSepolia", "BobSepolia",
    "PolygonAmoy", "ScrollSepolia", "Shimmer", "ZkSyncTestnet", "ModeSepolia", "PgnSepolia",
    "EtherlinkTestnet", "OpBNBTestnet", "RoninTestnet", "TaikoHekla", "AutonomysNovaTestnet",
    "FlareCoston2", "AcalaMandalaTestnet", "AcalaTestnet", "KaruraTestnet", "CfxTestnet",
    "PulsechainTestnet", "GravityAlphaTestnetSepolia", "XaiSepolia", "Koi", "ImmutableTestnet",
    "SoneiumMinatoTestnet", "WorldSepolia", "UnichainSepolia", "SignetPecorino", "Curtis",
    "TreasureTopaz", "SonicTestnet", "BerachainBepolia", "SuperpositionTestnet", "MonadTestnet",
    "RskTestnet", "TelosEvmTestnet", "AbstractTestnet", "LensTestnet", "SophonTestnet",
    "PolkadotTestnet", "InjectiveTestnet", "FluentDevnet", "FluentTestnet", "SeiTestnet",
    "StableTestnet", "CornTestnet", "Formicarium", "Insectarium", "SkaleBaseTestnet",

    # Local development chains
    "Dev", "AnvilHardhat", "Cannon",
})


#: Chains that have activated the Shanghai hardfork
#:
#: `See Shanghai upgrade <https://github.com/ethereum/execution-specs/blob/master/network-upgrades/mainnet-upgrades/shanghai.md>`__.
SHANGHAI_CHAINS: FrozenSet[InternalId] = frozenset({
    "Mainnet", "Goerli", "Sepolia", "Holesky", "Hoodi", "AnvilHardhat",
    "Optimism", "OptimismGoerli", "OptimismSepolia", "Bob", "BobSepolia", "Odyssey",
    "Base", "BaseGoerli", "BaseSepolia", "Blast", "BlastSepolia", "Celo", "CeloSepolia",
    "Fraxtal", "FraxtalTestnet", "Ink", "InkSepolia", "Gnosis", "Chiado",
    "Mantle", "MantleSepolia", "Mode", "ModeSepolia", "Polygon",
    "Arbitrum", "ArbitrumNova", "ArbitrumSepolia", "GravityAlphaMainnet", "GravityAlphaTestnetSepolia",
    "Xai", "XaiSepolia", "Syndr", "SyndrSepolia", "Etherlink", "EtherlinkTestnet",
    "Scroll", "ScrollSepolia", "HappychainTestnet", "Shimmer",
    "BinanceSmartChain", "BinanceSmartChainTestnet", "OpBNBMainnet", "OpBNBTestnet",
    "Taiko", "TaikoHekla", "Avalanche", "AvalancheFuji", "AutonomysNovaTestnet",
    "Acala", "AcalaMandalaTestnet", "AcalaTestnet", "Karura", "KaruraTestnet",
    "Darwinia", "Crab", "Cfx", "CfxTestnet", "Pulsechain", "PulsechainTestnet", "Koi",
    "Immutable", "ImmutableTestnet", "Soneium", "SoneiumMinatoTestnet", "World", "WorldSepolia",
    "Iotex", "Unichain", "UnichainSepolia", "SignetPecorino", "StableMainnet", "StableTestnet",
    "ApeChain", "Curtis", "SuperpositionTestnet", "Superposition", "Monad", "MonadTestnet",
    "Corn", "CornTestnet", "Rsk", "RskTestnet", "Berachain", "BerachainBepolia",
    "Injective", "InjectiveTestnet", "FluentDevnet", "FluentTestnet", "Cannon",
    "MemeCore", "Formicarium", "Insectarium",
})


#: The most popular wrapped native token on each chain
#:
#: Stored in any case, checksummed on access.
WRAPPED_NATIVE_TOKENS: Dict[InternalId, ChecksumAddress] = {
    "Mainnet": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
    "Optimism": "0x4200000000000000000000000000000000000006",
    "BinanceSmartChain": "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c",
    "OpBNBMainnet": "0x4200000000000000000000000000000000000006",
    "Arbitrum": "0x82af49447d8a07e3bd95bd0d56f35241523fbab1",
    "Base": "0x4200000000000000000000000000000000000006",
    "Linea": "0xe5d7c2a44ffddf6b295a15c148167daaaf5cf34f",
    "Mantle": "0xdeaddeaddeaddeaddeaddeaddeaddeaddead1111",
    "Blast": "0x4300000000000000000000000000000000000004",
    "Gnosis": "0xe91d153e0b41518a2ce8dd3d7944fa863463a97d",
    "Scroll": "0x5300000000000000000000000000000000000004",
    "Taiko": "0xa51894664a773981c6c112c43ce576f315d5b1b6",
    "Avalanche": "0xb31f66aa3c1e785363f0875a1b74e27b85fd66c7",
    "Polygon": "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270",
    "Fantom": "0x21be370d5312f44cb42ce377bc9b8a0cef1a4c83",
    "Iotex": "0xa00744882684c3e4747faefd68d283ea44099d03",
    "Core": "0x40375C92d9FAf44d2f9db9Bd9ba41a3317a2404f",
    "Merlin": "0xF6D226f9Dc15d9bB51182815b320D3fBE324e1bA",
    "Bitlayer": "0xff204e2681a6fa0e2c3fade68a1b28fb90e4fc5f",
    "ApeChain": "0x48b62137EdfA95a428D35C09E44256a739F6B557",
    "Vana": "0x00EDdD9621Fb08436d0331c149D1690909a5906d",
    "Zeta": "0x5F0b1a82749cb4E2278EC87F8BF6B618dC71a8bf",
    "Kaia": "0x19aac5f612f524b754ca7e7c41cbfa2e981a4432",
    "Story": "0x1514000000000000000000000000000000000000",
    "Treasure": "0x263d8f36bb8d0d9526255e205868c26690b04b88",
    "Superposition": "0x1fB719f10b56d7a85DCD32f27f897375fB21cfdd",
    "Sonic": "0x039e2fB66102314Ce7b64Ce5Ce3E5183bc94aD38",
    "Berachain": "0x6969696969696969696969696969696969696969",
    "Hyperliquid": "0x5555555555555555555555555555555555555555",
    "Abstract": "0x3439153EB7AF838Ad19d56E1571FBD09333C2809",
    "Sei": "0xE30feDd158A2e3b13e9badaeABaFc5516e95e8C7",
    "ZkSync": "0x5aea5775959fbc2557cc8789bc1bf90a239d9a91",
    "Sophon": "0xf1f9e08a0818594fde4713ae0db1e46672ca960e",
    "Rsk": "0x967f8799af07df1534d48a95a5c9febe92c53ae0",
    "MemeCore": "0x653e645e3d81a72e71328Bc01A04002945E3ef7A",
    "Formicarium": "0x653e645e3d81a72e71328Bc01A04002945E3ef7A",
    "Insectarium": "0x653e645e3d81a72e71328Bc01A04002945E3ef7A",
}


#: Ethereum networks that publish an EIP-1459 DNS node list
#:
#: See https://github.com/ethereum/discv4-dns-lists
DNS_DISCOVERY_CHAINS: FrozenSet[InternalId] = frozenset({
    "Mainnet", "Goerli", "Sepolia", "Ropsten", "Rinkeby", "Holesky", "Hoodi",
})

#: Public key of the EIP-1459 DNS tree signer
DNS_DISCOVERY_PREFIX = "enrtree://AKA3AM6LPBYEUDMVNU3BSVQJ5AD45Y7YPOHJLEF6W26QOE4VTUDPE@"
