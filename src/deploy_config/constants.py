"""Configuration constants for deploy-config library."""

# Compiler settings shared by every network
DEFAULT_COMPILER_VERSION = "0.8.17"
DEFAULT_VIA_IR = True
DEFAULT_BYTECODE_HASH = "none"  # Omit metadata hash from bytecode

# Network used when the caller does not name one
DEFAULT_NETWORK = "localhost"

# Env var holding the deployer private key on credentialed networks
DEPLOYER_KEY_ENV = "CYGNUS_DEPLOYER"

# Optimizer toggles understood by solc (legacy details plus yulDetails.stackAllocation)
LEGACY_OPTIMIZER_PASSES = (
    "peephole",
    "inliner",
    "jumpdestRemover",
    "orderLiterals",
    "deduplicate",
    "cse",
    "constantOptimizer",
)
YUL_OPTIMIZER_PASSES = ("stackAllocation",)
KNOWN_OPTIMIZER_PASSES = frozenset(LEGACY_OPTIMIZER_PASSES + YUL_OPTIMIZER_PASSES)

# Passes solc still runs with the optimizer disabled
MINIMAL_OPTIMIZER_PASSES = frozenset({"peephole", "jumpdestRemover"})

# solc stores runs as a uint32
MAX_OPTIMIZER_RUNS = 2**32 - 1

DEFAULT_OPTIMIZER_RUNS = 1_000_000
DEFAULT_OPTIMIZER_STEPS = (
    "dhfoDgvulfnTUtnIf[xa[r]EscLMcCTUtTOntnfDIulLculVcul[j]Tpeulxa[rul]xa[r]"
    "cLgvifCTUca[r]LSsTOtfDnca[r]Iulc]jmul[jul]VcTOculjmul"
)

# URL schemes accepted for RPC and explorer endpoints
ALLOWED_URL_SCHEMES = frozenset({"http", "https", "ws", "wss"})

# Built-in network table, in registration order.
# rpc_url may reference env vars as ${VAR}; accounts and api_key_ref name env vars.
NETWORK_CONFIG = {
    "localhost": {
        "chain_id": 31337,
        "rpc_url": "http://127.0.0.1:8545/",
        "credentials_required": False,
        "timeout_ms": 400_000_000,
    },
    "mainnet": {
        "chain_id": 1,
        "rpc_url": "${RPC_URL_MAINNET}",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_MAINNET",
            "api_url": "https://api.etherscan.io/api",
            "browser_url": "https://etherscan.io",
            "explorer_name": "mainnet",
        },
    },
    "arbitrum": {
        "chain_id": 42161,
        "rpc_url": "${RPC_URL_ARBITRUM}",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_ARBITRUM",
            "api_url": "https://api.arbiscan.io/api",
            "browser_url": "https://arbiscan.io",
            "explorer_name": "arbitrumOne",
        },
    },
    "polygon": {
        "chain_id": 137,
        "rpc_url": "${RPC_URL_POLYGON}",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_POLYGON",
            "api_url": "https://api.polygonscan.com/api",
            "browser_url": "https://polygonscan.com",
            "explorer_name": "polygon",
        },
    },
    "polygonMumbai": {
        "chain_id": 80001,
        "rpc_url": "${RPC_URL_POLYGON_TESTNET}",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_POLYGON",
            "api_url": "https://api-testnet.polygonscan.com/api",
            "browser_url": "https://mumbai.polygonscan.com",
            "explorer_name": "polygonMumbai",
        },
    },
    "optimism": {
        "chain_id": 10,
        "rpc_url": "${RPC_URL_OPTIMISM}",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_OPTIMISM",
            "api_url": "https://api-optimistic.etherscan.io/api",
            "browser_url": "https://optimistic.etherscan.io",
            "explorer_name": "optimisticEthereum",
        },
    },
    "optimismGoerli": {
        "chain_id": 420,
        "rpc_url": "${RPC_URL_OPTIMISM_GOERLI}",
        "accounts": (DEPLOYER_KEY_ENV,),
    },
    "bsc": {
        "chain_id": 56,
        "rpc_url": "https://rpc.ankr.com/bsc",
        "credentials_required": False,
    },
    "zkevm": {
        "chain_id": 1101,
        "rpc_url": "${RPC_URL_ZKEVM}",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_ZKEVM",
            "api_url": "https://api-zkevm.polygonscan.com/",
            "browser_url": "https://zkevm.polygonscan.com/",
            "explorer_name": "zkevm",
        },
    },
    "zkevmTestnet": {
        "chain_id": 1442,
        "rpc_url": "https://rpc.ankr.com/polygon_zkevm_testnet",
        "accounts": (DEPLOYER_KEY_ENV,),
        "verification": {
            "api_key_ref": "ETHERSCAN_KEY_ZKEVM",
            "api_url": "https://api-testnet-zkevm.polygonscan.com/",
            "browser_url": "https://testnet-zkevm.polygonscan.com/",
            "explorer_name": "zkevmTestnet",
        },
    },
}
