# --- STAKING POOL (Aragon Staking v0.3) ---
STAKING_ABI = [
    {
        "inputs": [
            {"name": "_amount", "type": "uint256"},
            {"name": "_data", "type": "bytes"}
        ],
        "name": "stake",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_lockManager", "type": "address"},
            {"name": "_allowance", "type": "uint256"},
            {"name": "_data", "type": "bytes"}
        ],
        "name": "allowManager",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_user", "type": "address"},
            {"name": "_lockManager", "type": "address"}
        ],
        "name": "getLock",
        "outputs": [
            {"name": "amount", "type": "uint256"},
            {"name": "allowance", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    }
]

STAKING_FACTORY_ABI = [
    {
        "inputs": [{"name": "_token", "type": "address"}],
        "name": "getInstance",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_token", "type": "address"}],
        "name": "getOrCreateInstance",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "instance", "type": "address"},
            {"indexed": True, "name": "token", "type": "address"}
        ],
        "name": "NewStaking",
        "type": "event"
    }
]
