"""
Conditional-tier rules: terms allowed only when an explanatory footnote
(※1, *1, 注1 ...) is attached. The matcher always reports them; the
aggregator drops those whose footnote is present.
"""

HA = "HA"
SH = "SH"

CONDITIONAL_RULES = [
    # Penetration
    {
        "id": "conditional.penetration.shinto.ha",
        "tier": "conditional",
        "keyword": ["浸透", "染み込む", "染みこむ", "染込む"],
        "category": "penetration",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "products": [HA],
        "rationale": "化粧品の浸透は角質層までであることを明示する必要があります。",
        "reference_hint": "knowledge/HA/02_浸透表現の注釈について.txt",
        "required_annotation": "※角質層まで",
        "ok_examples": ["浸透※1 ※1角質層まで"],
        "ng_examples": ["肌の奥まで浸透"],
        "exceptions": [
            {"condition": "医薬部外品の承認成分", "allowed_pattern": r"真皮|表皮"},
        ],
    },
    {
        "id": "conditional.penetration.shinto.sh",
        "tier": "conditional",
        "keyword": ["浸透", "染み込む", "染みこむ", "染込む"],
        "category": "penetration",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "products": [SH],
        "rationale": "爪への浸透は背爪表面までであることを明示する必要があります。",
        "reference_hint": "knowledge/SH/02_浸透表現の注釈について.txt",
        "required_annotation": "※背爪表面に",
        "ok_examples": ["浸透※1 ※1背爪表面に"],
    },
    {
        "id": "conditional.penetration.todoku",
        "tier": "conditional",
        "keyword": ["届く", "到達する", "到達"],
        "category": "penetration",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "有効成分が届く範囲を注釈で限定する必要があります。",
        "reference_hint": "knowledge/common/02_浸透表現の注釈について.txt",
        "required_annotation": "※角質層まで",
    },
    {
        "id": "conditional.penetration.chunyu",
        "tier": "conditional",
        "keyword": ["注入", "直接的", "直接"],
        "category": "penetration",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "注入・直接という表現は医療行為を想起させるため、到達範囲の注釈が必要です。",
        "reference_hint": "knowledge/common/02_浸透表現の注釈について.txt",
        "required_annotation": "※角質層まで",
        "ok_examples": ["直注入※2 ※2角質層まで"],
        "ng_examples": ["ヒアルロン酸直注入で目元ケア"],
    },
    # Ingredients
    {
        "id": "conditional.ingredient.hyaluronic-acid",
        "tier": "conditional",
        "keyword": ["ヒアルロン酸", "ヒアルロン"],
        "category": "ingredient",
        "severity": "medium",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "成分名を訴求する場合は配合目的（保湿成分等）の注釈が必要です。",
        "reference_hint": "knowledge/common/04_成分表示の注釈について.txt",
        "required_annotation": "※保湿成分",
        "ok_examples": ["ヒアルロン酸※1 ※1保湿成分"],
        "ng_examples": ["ヒアルロン酸たっぷり配合"],
        "exceptions": [
            {"condition": "一般知識の説明", "allowed_pattern": r"ヒアルロン酸は|ヒアルロン酸が|分子|一般的"},
            {"condition": "他社商品の説明", "allowed_pattern": r"多くの|一般的な|他の|従来の"},
        ],
    },
    {
        "id": "conditional.ingredient.collagen",
        "tier": "conditional",
        "keyword": "コラーゲン",
        "category": "ingredient",
        "severity": "medium",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "成分名を訴求する場合は配合目的（保湿成分等）の注釈が必要です。",
        "reference_hint": "knowledge/common/04_成分表示の注釈について.txt",
        "required_annotation": "※保湿成分",
    },
    {
        "id": "conditional.ingredient.retinol",
        "tier": "conditional",
        "keyword": "レチノール",
        "category": "ingredient",
        "severity": "medium",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "成分名を訴求する場合は配合目的の注釈が必要です。",
        "reference_hint": "knowledge/common/04_成分表示の注釈について.txt",
        "required_annotation": "※整肌成分",
    },
    {
        "id": "conditional.ingredient.placenta",
        "tier": "conditional",
        "keyword": "プラセンタ",
        "category": "ingredient",
        "severity": "medium",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "成分名を訴求する場合は配合目的の注釈が必要です。",
        "reference_hint": "knowledge/common/04_成分表示の注釈について.txt",
        "required_annotation": "※保湿成分",
    },
    {
        "id": "conditional.ingredient.ceramide",
        "tier": "conditional",
        "keyword": "セラミド",
        "category": "ingredient",
        "severity": "medium",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "成分名を訴求する場合は配合目的の注釈が必要です。",
        "reference_hint": "knowledge/common/04_成分表示の注釈について.txt",
        "required_annotation": "※保湿成分",
    },
    # Medical-sounding effects
    {
        "id": "conditional.medical-effect.sakkin.ha",
        "tier": "conditional",
        "keyword": ["殺菌", "さっきん"],
        "category": "medical-effect",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "products": [HA],
        "rationale": "化粧品で殺菌を訴求する場合は作用の対象を注釈で限定する必要があります。",
        "reference_hint": "knowledge/HA/05_殺菌表現について.txt",
        "required_annotation": "※製品の衛生を保つため",
    },
    {
        "id": "conditional.medical-effect.sakkin.sh",
        "tier": "conditional",
        "keyword": ["殺菌", "さっきん"],
        "category": "medical-effect",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "products": [SH],
        "rationale": "殺菌は有効成分の作用として承認範囲内で注釈とともに記載する必要があります。",
        "reference_hint": "knowledge/SH/05_殺菌表現について.txt",
        "required_annotation": "※殺菌は消毒の作用機序として",
    },
    {
        "id": "conditional.medical-effect.kokin",
        "tier": "conditional",
        "keyword": ["抗菌", "こうきん"],
        "category": "medical-effect",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "抗菌を訴求する場合は作用の対象を注釈で限定する必要があります。",
        "reference_hint": "knowledge/common/06_殺菌・抗菌表現について.txt",
        "required_annotation": "※製品の衛生を保つため",
    },
    {
        "id": "conditional.medical-effect.shodoku",
        "tier": "conditional",
        "keyword": ["消毒", "しょうどく"],
        "category": "medical-effect",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "消毒は医薬部外品の承認効能の範囲で注釈とともに記載する必要があります。",
        "reference_hint": "knowledge/common/06_殺菌・抗菌表現について.txt",
        "required_annotation": "※承認された効能の範囲",
    },
    # Dark circles
    {
        "id": "conditional.kuma.kuma",
        "tier": "conditional",
        "keyword": ["クマ", "くま"],
        "category": "kuma",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "クマは乾燥やくすみ等による見た目であることを注釈で示す必要があります。",
        "reference_hint": "knowledge/common/08_目の下のクマ表現について.txt",
        "required_annotation": "※乾燥や古い角質によるくすみ、ハリが不足した暗い目の下",
        "ok_examples": ["クマ※対策 ※乾燥や古い角質によるくすみ、ハリが不足した暗い目の下"],
    },
    {
        "id": "conditional.kuma.colored",
        "tier": "conditional",
        "keyword": ["青クマ", "青くま", "茶クマ", "茶くま", "黒クマ", "黒くま"],
        "category": "kuma",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "色別のクマ表現は原因を特定した効能の暗示となるため注釈が必要です。",
        "reference_hint": "knowledge/common/08_目の下のクマ表現について.txt",
        "required_annotation": "※乾燥や古い角質によるくすみ、ハリが不足した暗い目の下",
    },
    # Refund guarantees
    {
        "id": "conditional.guarantee.refund",
        "tier": "conditional",
        "keyword": ["全額返金保証", "返金保証", "満足保証"],
        "category": "refund-guarantee",
        "severity": "medium",
        "regulatory_class": "specified-commercial-transactions",
        "rationale": "返金保証には適用条件（期間・回数等）の注釈が必要です。",
        "reference_hint": "knowledge/common/15_返金保証表記について.txt",
        "required_annotation": "※初回のみ、到着後30日以内",
    },
    # Rankings
    {
        "id": "conditional.ranking.first-place",
        "tier": "conditional",
        "keyword": ["第1位", "第一位", "1位", "一位"],
        "category": "ranking",
        "severity": "high",
        "regulatory_class": "fair-display",
        "rationale": "順位表示には調査機関・期間・対象の注釈が必要です。",
        "reference_hint": "knowledge/common/10_No1・ランキング表記について.txt",
        "required_annotation": "※調査機関・調査期間・調査対象",
    },
    {
        "id": "conditional.ranking.number-one",
        "tier": "conditional",
        "keyword": ["NO.1", "No.1", "ナンバーワン", "ナンバー1", "No1"],
        "category": "ranking",
        "severity": "high",
        "regulatory_class": "fair-display",
        "rationale": "No.1表示には根拠となる調査の注釈が必要です。",
        "reference_hint": "knowledge/common/10_No1・ランキング表記について.txt",
        "required_annotation": "※調査機関・調査期間・調査対象",
    },
    {
        "id": "conditional.ranking.top",
        "tier": "conditional",
        "keyword": ["トップ", "TOP"],
        "category": "ranking",
        "severity": "high",
        "regulatory_class": "fair-display",
        "rationale": "トップ表示は最上級表現であり根拠の注釈が必要です。",
        "reference_hint": "knowledge/common/10_No1・ランキング表記について.txt",
        "required_annotation": "※調査機関・調査期間・調査対象",
    },
]
