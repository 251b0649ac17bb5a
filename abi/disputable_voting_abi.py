# --- DISPUTABLE VOTING (Aragon Disputable Voting v1) ---
DISPUTABLE_VOTING_ABI = [
    {
        "inputs": [
            {"name": "_executionScript", "type": "bytes"},
            {"name": "_context", "type": "bytes"}
        ],
        "name": "newVote",
        "outputs": [{"name": "voteId", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_voteId", "type": "uint256"},
            {"name": "_supports", "type": "bool"}
        ],
        "name": "vote",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_voteId", "type": "uint256"},
            {"name": "_supports", "type": "bool"},
            {"name": "_voters", "type": "address[]"}
        ],
        "name": "voteOnBehalfOf",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "_representative", "type": "address"}],
        "name": "setRepresentative",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_voteId", "type": "uint256"},
            {"name": "_executionScript", "type": "bytes"}
        ],
        "name": "executeVote",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "_supportRequiredPct", "type": "uint64"}],
        "name": "changeSupportRequiredPct",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "_voteId", "type": "uint256"}],
        "name": "getVote",
        "outputs": [
            {"name": "yea", "type": "uint256"},
            {"name": "nay", "type": "uint256"},
            {"name": "totalPower", "type": "uint256"},
            {"name": "startDate", "type": "uint64"},
            {"name": "snapshotBlock", "type": "uint64"},
            {"name": "status", "type": "uint8"},
            {"name": "settingId", "type": "uint256"},
            {"name": "actionId", "type": "uint256"},
            {"name": "pausedAt", "type": "uint64"},
            {"name": "pauseDuration", "type": "uint64"},
            {"name": "quietEndingExtensionDuration", "type": "uint64"},
            {"name": "quietEndingSnapshotSupport", "type": "uint8"},
            {"name": "executionScriptHash", "type": "bytes32"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "voteId", "type": "uint256"},
            {"indexed": True, "name": "creator", "type": "address"},
            {"indexed": False, "name": "context", "type": "bytes"},
            {"indexed": False, "name": "executionScript", "type": "bytes"}
        ],
        "name": "StartVote",
        "type": "event"
    }
]
