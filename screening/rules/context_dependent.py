"""
Context-dependent rules: terms that are fine on their own and become a
violation only inside certain framings (e.g. 若々しい next to a promise).

Patterns are evaluated in order; the first NG pattern that matches decides
the reported reason and severity unless an OK pattern also matches.
"""

_URGENCY = "(今なら|いまなら|今だけ|いまだけ)"

CONTEXT_DEPENDENT_RULES = [
    {
        "id": "context.youthful.wakawakashii",
        "tier": "context-dependent",
        "keyword": ["若々しい", "若々しく", "若々しさ"],
        "category": "youthful-appearance",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "若々しさは印象としての表現に限られ、効果として約束すると若返りの標榜になります。",
        "reference_hint": "knowledge/common/27_若々しい印象や若見え表現について.txt",
        "acceptable_rewrite": "若々しい印象の目元へ",
        "ok_examples": ["ハリやツヤが出て、若々しい印象の目の下に導きます"],
        "ng_examples": ["週に1回貼って寝るだけで若々しい肌があなたのものに"],
        "ng_patterns": [
            {
                "pattern": r"だけで.{0,20}若々しい.{0,20}あなたのものに",
                "reason": "使用するだけで若々しさが手に入ると断定しています。",
                "severity": "high",
                "example": "貼って寝るだけで若々しい肌があなたのものに",
            },
            {
                "pattern": r"若々しい.{0,20}(よみがえる|蘇る|復活)",
                "reason": "若返りを想起させる表現と組み合わされています。",
                "severity": "critical",
            },
            {
                "pattern": r"若々しい.{0,20}(約束|保証)",
                "reason": "若々しさを効果として保証しています。",
                "severity": "critical",
            },
        ],
        "ok_patterns": [
            {"pattern": r"若々しい印象", "example": "若々しい印象の目元"},
            {"pattern": r"若々しく(見える|感じる|映る)"},
        ],
    },
    {
        "id": "context.youthful.wakamie",
        "tier": "context-dependent",
        "keyword": "若見え",
        "category": "youthful-appearance",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "若見えはメーキャップ効果等の印象表現に限られます。",
        "reference_hint": "knowledge/common/27_若々しい印象や若見え表現について.txt",
        "ng_patterns": [
            {
                "pattern": r"だけで.{0,20}若見え",
                "reason": "使用するだけで若見えすると断定しています。",
                "severity": "high",
            },
            {
                "pattern": r"若見え.{0,20}(約束|保証)",
                "reason": "若見えを効果として保証しています。",
                "severity": "critical",
            },
        ],
        "ok_patterns": [
            {"pattern": r"若見え(手肌|肌を目指|を目指す)"},
        ],
    },
    {
        "id": "context.facility.senmon-kikan",
        "tier": "context-dependent",
        "keyword": ["専門機関", "クリニック", "美容皮膚科"],
        "category": "medical-facility",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "医療機関と比較して同等以上の効果を暗示する表現は禁止されています。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
        "ng_patterns": [
            {
                "pattern": r"専門機関.{0,30}考えましたが.{0,30}(この|本|商品)",
                "reason": "医療機関の代わりになると暗示しています。",
                "severity": "high",
            },
            {
                "pattern": r"(この|本|商品).{0,30}専門機関.{0,30}不要",
                "reason": "医療機関が不要になると暗示しています。",
                "severity": "critical",
            },
            {
                "pattern": r"専門機関.{0,30}(行かなくても|通わなくても)",
                "reason": "医療機関に通う必要がなくなると暗示しています。",
                "severity": "critical",
            },
        ],
        "ok_patterns": [
            {"pattern": r"(マッサージ|クリーム|美容液).{0,20}専門機関.{0,20}(色々|様々|いろいろ)"},
        ],
    },
    {
        "id": "context.brightness.akarui",
        "tier": "context-dependent",
        "keyword": ["明るくなる", "明るい", "明るく"],
        "category": "brightness",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "クマやくすみと結びつけた明るさの表現は美白・改善効果の暗示になります。",
        "reference_hint": "knowledge/common/08_目の下のクマ表現について.txt",
        "ng_patterns": [
            {
                "pattern": r"クマ.{0,20}明るい(目元|肌|トーン)",
                "reason": "クマが明るくなる効果を暗示しています。",
                "severity": "high",
            },
            {
                "pattern": r"(目元|目の下).{0,20}明るくなる",
                "reason": "目元の色調が変化する効果を暗示しています。",
                "severity": "high",
            },
            {
                "pattern": r"くすみ.{0,20}明るい",
                "reason": "くすみが取れて明るくなる効果を暗示しています。",
                "severity": "medium",
            },
        ],
        "ok_patterns": [
            {"pattern": r"明るい印象"},
            {"pattern": r"明るいトーンのメイク"},
            {"pattern": r"明るい(雰囲気|表情)"},
        ],
    },
    {
        "id": "context.kuma.kaiketsu",
        "tier": "context-dependent",
        "keyword": ["救世主", "悩み解消", "解決"],
        "category": "kuma",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "クマの悩みを解決すると読める表現は効能範囲を逸脱します。",
        "reference_hint": "knowledge/common/08_目の下のクマ表現について.txt",
        "ng_patterns": [
            {
                "pattern": r"クマ.{0,20}救世主",
                "reason": "クマに対する効果を過度に強調しています。",
                "severity": "high",
            },
            {
                "pattern": r"クマ.{0,20}(解決|解消)",
                "reason": "クマが解消されると暗示しています。",
                "severity": "critical",
            },
        ],
        "ok_patterns": [
            {"pattern": r"クマ.{0,20}(対策|ケア|特化)"},
        ],
    },
    {
        "id": "context.limited-time.imanara",
        "tier": "context-dependent",
        "keyword": ["今なら", "いまなら", "今だけ", "いまだけ"],
        "category": "limited-time",
        "severity": "medium",
        "regulatory_class": "fair-display",
        "rationale": "期間を明示しない限定表現は有利誤認のおそれがあります。",
        "reference_hint": "knowledge/common/16_期間限定表現について.txt",
        "acceptable_rewrite": "2025年12月31日までのご注文で",
        "ng_patterns": [
            {
                "pattern": _URGENCY + r".{0,30}(OFF|オフ|割引|半額|特典|ポイント|円)",
                "reason": "期間を示さずに価格上の利益を強調しています。",
                "severity": "medium",
            },
            {
                "pattern": _URGENCY + r".{0,30}(お得|特別|限定|キャンペーン)",
                "reason": "期間を示さずに特別感を演出しています。",
                "severity": "medium",
            },
        ],
        "ok_patterns": [
            {"pattern": r"今(申込む|申し込む)と"},
            {"pattern": r"今は.{0,30}(OFF|オフ|割引)"},
            {"pattern": r"今(この|現在)"},
        ],
    },
]
