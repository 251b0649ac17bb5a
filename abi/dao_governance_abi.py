# --- KERNEL (Aragon OS DAO) ---
KERNEL_ABI = [
    {
        "inputs": [
            {"name": "_namespace", "type": "bytes32"},
            {"name": "_appId", "type": "bytes32"},
            {"name": "_app", "type": "address"}
        ],
        "name": "setApp",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_namespace", "type": "bytes32"},
            {"name": "_appId", "type": "bytes32"}
        ],
        "name": "getApp",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]

# --- AGENT (Aragon Agent / Vault) ---
AGENT_ABI = [
    {
        "inputs": [
            {"name": "_token", "type": "address"},
            {"name": "_to", "type": "address"},
            {"name": "_value", "type": "uint256"}
        ],
        "name": "transfer",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_target", "type": "address"},
            {"name": "_ethValue", "type": "uint256"},
            {"name": "_data", "type": "bytes"}
        ],
        "name": "execute",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
