"""Constants and configuration for Stargate LPStaking yield analysis."""

from types import MappingProxyType

from stargate_yield.models import ChainConfig

# Chain table: LPStaking contract plus the two stablecoins priced at 1 USD without asking the feed.
# Source: https://stargateprotocol.gitbook.io/stargate/developers/contract-addresses/mainnet
CHAINS: MappingProxyType[str, ChainConfig] = MappingProxyType(
    {
        "mainnet": ChainConfig(
            name="mainnet",
            lp_staking_address="0xB0D502E938ed5f4df2E681fE6E419ff29631d62b",
            usdc_address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
            usdt_address="0xdAC17F958D2ee523a2206206994597C13D831ec7",
            native_price_id="ethereum",
            native_ticker="ETH",
            coingecko_platform="ethereum",
            default_rpc_urls=(
                "https://eth.llamarpc.com",
                "https://ethereum.publicnode.com",
            ),
        ),
        "bsc": ChainConfig(
            name="bsc",
            lp_staking_address="0x3052A0F6ab15b4AE1df39962d5DdEFacA86DaB47",
            usdc_address="0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d",
            usdt_address="0x55d398326f99059fF775485246999027B3197955",
            native_price_id="binancecoin",
            native_ticker="BNB",
            coingecko_platform="binance-smart-chain",
            default_rpc_urls=(
                "https://bsc-dataseed.bnbchain.org",
                "https://bsc.publicnode.com",
            ),
        ),
        "polygon": ChainConfig(
            name="polygon",
            lp_staking_address="0x8731d54E9D02c286767d56ac03e8037C07e01e98",
            usdc_address="0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
            usdt_address="0xc2132D05D31c914a87C6611C10748AEb04B58e8F",
            native_price_id="matic-network",
            native_ticker="MATIC",
            coingecko_platform="polygon-pos",
            default_rpc_urls=(
                "https://polygon-rpc.com",
                "https://polygon-bor.publicnode.com",
            ),
        ),
    }
)

DEFAULT_CHAIN = "mainnet"

# Minimal ABI for Stargate LPStaking - only the views we read.
LP_STAKING_MIN_ABI: list[dict] = [
    {
        "type": "function",
        "name": "stargate",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "type": "function",
        "name": "stargatePerBlock",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "poolLength",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "totalAllocPoint",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "poolInfo",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "uint256"}],
        "outputs": [
            {"name": "lpToken", "type": "address"},  # 0
            {"name": "allocPoint", "type": "uint256"},  # 1
            {"name": "lastRewardBlock", "type": "uint256"},  # 2
            {"name": "accStargatePerShare", "type": "uint256"},  # 3
        ],
    },
    {
        "type": "function",
        "name": "userInfo",
        "stateMutability": "view",
        "inputs": [
            {"name": "", "type": "uint256"},
            {"name": "", "type": "address"},
        ],
        "outputs": [
            {"name": "amount", "type": "uint256"},
            {"name": "rewardDebt", "type": "uint256"},
        ],
    },
    {
        "type": "function",
        "name": "lpBalances",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "uint256"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "pendingStargate",
        "stateMutability": "view",
        "inputs": [
            {"name": "_pid", "type": "uint256"},
            {"name": "_user", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]

# Minimal ABI for a Stargate LP pool token (S*USDC, S*ETH, ...).
LP_POOL_MIN_ABI: list[dict] = [
    {
        "type": "function",
        "name": "name",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
    {
        "type": "function",
        "name": "token",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "type": "function",
        "name": "decimals",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
]

ERC20_MIN_ABI: list[dict] = [
    {
        "type": "function",
        "name": "name",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
    {
        "type": "function",
        "name": "symbol",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
]

# Reward token (STG)
STG_DECIMALS = 18
STG_TICKER = "STG"
STG_PRICE_ID = "stargate-finance"

# Sentinel key for the chain's native asset in the address-keyed price map.
NATIVE_TOKEN_ADDRESS = "0x0000000000000000000000000000000000000000"

# Average block time is sampled between `latest` and `latest - BLOCK_TIME_SAMPLE_SPAN`.
BLOCK_TIME_SAMPLE_SPAN = 100

SECONDS_PER_HOUR = 3600
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
WEEKS_PER_MONTH = 4  # Coarse on purpose: month = 4 weeks, year = 12 months
MONTHS_PER_YEAR = 12
WEEKS_PER_YEAR = 52

COINGECKO_API_BASE = "https://api.coingecko.com/api/v3"
COINGECKO_API_KEY_HEADER = "x-cg-demo-api-key"

DEFAULT_TIMEOUT = 30
DEFAULT_PRICE_TIMEOUT = 5
DEFAULT_MAX_WORKERS = 8
