# --- AGREEMENT (Aragon Agreement v1) ---
AGREEMENT_ABI = [
    # --- READ FUNCTIONS ---
    {
        "inputs": [],
        "name": "getCurrentSettingId",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_settingId", "type": "uint256"}],
        "name": "getSetting",
        "outputs": [
            {"name": "arbitrator", "type": "address"},
            {"name": "aragonAppFeesCashier", "type": "address"},
            {"name": "title", "type": "string"},
            {"name": "content", "type": "bytes"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_signer", "type": "address"}],
        "name": "getSigner",
        "outputs": [
            {"name": "lastSettingIdSigned", "type": "uint256"},
            {"name": "mustSign", "type": "bool"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_disputable", "type": "address"}],
        "name": "getDisputableInfo",
        "outputs": [
            {"name": "activated", "type": "bool"},
            {"name": "currentCollateralRequirementId", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_disputable", "type": "address"},
            {"name": "_collateralRequirementId", "type": "uint256"}
        ],
        "name": "getCollateralRequirement",
        "outputs": [
            {"name": "collateralToken", "type": "address"},
            {"name": "challengeDuration", "type": "uint64"},
            {"name": "actionAmount", "type": "uint256"},
            {"name": "challengeAmount", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "_challengeId", "type": "uint256"}],
        "name": "getChallenge",
        "outputs": [
            {"name": "actionId", "type": "uint256"},
            {"name": "challenger", "type": "address"},
            {"name": "endDate", "type": "uint64"},
            {"name": "context", "type": "bytes"},
            {"name": "settlementOffer", "type": "uint256"},
            {"name": "state", "type": "uint8"},
            {"name": "submitterFinishedEvidence", "type": "bool"},
            {"name": "challengerFinishedEvidence", "type": "bool"},
            {"name": "disputeId", "type": "uint256"},
            {"name": "ruling", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "stakingFactory",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    # --- WRITE FUNCTIONS ---
    {
        "inputs": [{"name": "_settingId", "type": "uint256"}],
        "name": "sign",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_actionId", "type": "uint256"},
            {"name": "_settlementOffer", "type": "uint256"},
            {"name": "_finishedEvidence", "type": "bool"},
            {"name": "_context", "type": "bytes"}
        ],
        "name": "challengeAction",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_actionId", "type": "uint256"},
            {"name": "_submitterFinishedEvidence", "type": "bool"}
        ],
        "name": "disputeAction",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "_actionId", "type": "uint256"}],
        "name": "settleAction",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "_arbitrator", "type": "address"},
            {"name": "_setAppFeesCashier", "type": "bool"},
            {"name": "_title", "type": "string"},
            {"name": "_content", "type": "bytes"}
        ],
        "name": "changeSetting",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    # --- EVENTS ---
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "signer", "type": "address"},
            {"indexed": False, "name": "settingId", "type": "uint256"}
        ],
        "name": "Signed",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "actionId", "type": "uint256"},
            {"indexed": True, "name": "challengeId", "type": "uint256"}
        ],
        "name": "ActionChallenged",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "actionId", "type": "uint256"},
            {"indexed": True, "name": "challengeId", "type": "uint256"}
        ],
        "name": "ActionDisputed",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "actionId", "type": "uint256"},
            {"indexed": True, "name": "challengeId", "type": "uint256"}
        ],
        "name": "ActionSettled",
        "type": "event"
    }
]
