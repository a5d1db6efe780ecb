"""
Absolute-tier rules: terms that are a violation wherever they appear,
regardless of footnotes or surrounding phrasing.
"""

ABSOLUTE_RULES = [
    # Rejuvenation
    {
        "id": "absolute.rejuvenation.wakagaeri",
        "tier": "absolute",
        "keyword": ["若返り", "若返る"],
        "category": "rejuvenation",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "若返りを標榜する表現は化粧品の効能範囲を逸脱します。",
        "reference_hint": "knowledge/common/05_アンチエイジング表現について.txt",
        "acceptable_rewrite": "若々しい印象に",
        "ng_examples": ["若返る目元へ"],
    },
    {
        "id": "absolute.rejuvenation.yomigaeru",
        "tier": "absolute",
        "keyword": ["よみがえる", "蘇る", "甦る"],
        "category": "rejuvenation",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "肌の状態が元に戻るかのような表現は医薬品的な効能の暗示になります。",
        "reference_hint": "knowledge/common/05_アンチエイジング表現について.txt",
        "acceptable_rewrite": "うるおいに満ちた肌へ",
    },
    {
        "id": "absolute.rejuvenation.fukkatsu",
        "tier": "absolute",
        "keyword": ["復活する", "復活"],
        "category": "rejuvenation",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "失われた機能が戻るかのような表現は化粧品の効能範囲外です。",
        "reference_hint": "knowledge/common/05_アンチエイジング表現について.txt",
        "acceptable_rewrite": "ハリのある印象に",
    },
    {
        "id": "absolute.rejuvenation.saisei",
        "tier": "absolute",
        "keyword": ["再生する", "再生"],
        "category": "rejuvenation",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "細胞や肌の再生は医薬品的な効能効果の表現です。",
        "reference_hint": "knowledge/common/05_アンチエイジング表現について.txt",
        "acceptable_rewrite": "整える",
    },
    {
        "id": "absolute.rejuvenation.fukemie",
        "tier": "absolute",
        "keyword": "老け見え",
        "category": "rejuvenation",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "老化を前提とした表現は老化防止効果の暗示につながります。",
        "reference_hint": "knowledge/common/05_アンチエイジング表現について.txt",
        "acceptable_rewrite": "乾燥による小じわを目立たなくする",
        "ng_examples": ["老け見え印象対策"],
    },
    # Guarantees
    {
        "id": "absolute.guarantee.yakusoku",
        "tier": "absolute",
        "keyword": ["約束します", "お約束", "約束"],
        "category": "guarantee",
        "severity": "critical",
        "regulatory_class": "fair-display",
        "rationale": "効果を約束する表現は優良誤認にあたります。",
        "reference_hint": "knowledge/common/12_効果保証表現について.txt",
        "acceptable_rewrite": "目指します",
    },
    {
        "id": "absolute.guarantee.hosho",
        "tier": "absolute",
        "keyword": ["保証します", "保証", "保障"],
        "category": "guarantee",
        "severity": "critical",
        "regulatory_class": "fair-display",
        "rationale": "効果を保証する表現は優良誤認にあたります。",
        "reference_hint": "knowledge/common/12_効果保証表現について.txt",
        "acceptable_rewrite": "実感いただけるよう",
    },
    {
        "id": "absolute.guarantee.certainty",
        "tier": "absolute",
        "keyword": ["必ず", "絶対", "確実に", "100%"],
        "category": "guarantee",
        "severity": "critical",
        "regulatory_class": "fair-display",
        "rationale": "効果の確実性を断定する表現は優良誤認にあたります。",
        "reference_hint": "knowledge/common/12_効果保証表現について.txt",
    },
    {
        "id": "absolute.guarantee.perfect",
        "tier": "absolute",
        "keyword": ["完全に", "完璧に", "完璧な"],
        "category": "guarantee",
        "severity": "high",
        "regulatory_class": "fair-display",
        "rationale": "効果の完全性を示す表現は最大級表現として禁止されています。",
        "reference_hint": "knowledge/common/12_効果保証表現について.txt",
    },
    {
        "id": "absolute.guarantee.permanent",
        "tier": "absolute",
        "keyword": ["永久に", "永遠に"],
        "category": "guarantee",
        "severity": "critical",
        "regulatory_class": "fair-display",
        "rationale": "効果の永続性を示す表現は優良誤認にあたります。",
        "reference_hint": "knowledge/common/12_効果保証表現について.txt",
    },
    # Medical expressions
    {
        "id": "absolute.medical.chiryo",
        "tier": "absolute",
        "keyword": ["治療する", "治療"],
        "category": "medical",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "治療は医薬品・医療行為の表現であり化粧品には使用できません。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
        "acceptable_rewrite": "ケア",
    },
    {
        "id": "absolute.medical.naosu",
        "tier": "absolute",
        "keyword": ["治ります", "治す", "治る"],
        "category": "medical",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "疾病を治す表現は医薬品的な効能効果です。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
        "acceptable_rewrite": "整える",
    },
    {
        "id": "absolute.medical.kanchi",
        "tier": "absolute",
        "keyword": ["完治", "全治"],
        "category": "medical",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "完治を示す表現は医薬品的な効能効果です。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
    },
    {
        "id": "absolute.medical.shujutsu",
        "tier": "absolute",
        "keyword": ["手術", "施術"],
        "category": "medical",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "医療行為を想起させ、医療との同等性を暗示します。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
    },
    {
        "id": "absolute.medical.chusha",
        "tier": "absolute",
        "keyword": "注射",
        "category": "medical",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "注射は医療行為であり、化粧品の使用方法と誤認させます。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
        "acceptable_rewrite": "マイクロニードルでとどける",
    },
    # Claims outside the approved efficacy range
    {
        "id": "absolute.out-of-scope.kaizen",
        "tier": "absolute",
        "keyword": ["改善する", "改善"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "改善は化粧品の効能範囲を超える医薬品的表現です。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
        "acceptable_rewrite": "ケアする",
    },
    {
        "id": "absolute.out-of-scope.yobo",
        "tier": "absolute",
        "keyword": ["予防する", "予防"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "予防は化粧品の効能範囲を超える表現です（承認された効能を除く）。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
        "acceptable_rewrite": "防ぐ（乾燥による）",
    },
    {
        "id": "absolute.out-of-scope.kanwa",
        "tier": "absolute",
        "keyword": ["緩和する", "緩和", "軽減する", "軽減"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "症状の緩和・軽減は医薬品的な効能効果です。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
    },
    {
        "id": "absolute.out-of-scope.kaisho",
        "tier": "absolute",
        "keyword": ["解消する", "解消"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "悩みの解消をうたう表現は効能範囲を逸脱します。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
    },
    {
        "id": "absolute.out-of-scope.anti-aging",
        "tier": "absolute",
        "keyword": ["アンチエイジング", "老化防止", "老化を防ぐ"],
        "category": "out-of-scope-efficacy",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "老化防止は化粧品の効能範囲外です。",
        "reference_hint": "knowledge/common/05_アンチエイジング表現について.txt",
        "acceptable_rewrite": "エイジングケア※（※年齢に応じたお手入れ）",
    },
    {
        "id": "absolute.out-of-scope.shimi",
        "tier": "absolute",
        "keyword": ["シミ消し", "シミを消す", "シミが消える"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "シミを消す表現は医薬品的な効能効果です。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
    },
    {
        "id": "absolute.out-of-scope.shiwa",
        "tier": "absolute",
        "keyword": ["シワ改善", "シワを改善"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "シワ改善は承認を受けた医薬部外品のみが標榜できます。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
        "acceptable_rewrite": "乾燥による小じわを目立たなくする",
    },
    {
        "id": "absolute.out-of-scope.nikibi",
        "tier": "absolute",
        "keyword": ["ニキビ治療", "ニキビを治す"],
        "category": "out-of-scope-efficacy",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "ニキビの治療は医薬品的な効能効果です。",
        "reference_hint": "knowledge/common/03_医療的表現について.txt",
    },
    {
        "id": "absolute.out-of-scope.bihaku",
        "tier": "absolute",
        "keyword": ["美白効果", "美白"],
        "category": "out-of-scope-efficacy",
        "severity": "high",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "美白は承認を受けた医薬部外品のみが標榜できる効能です。",
        "reference_hint": "knowledge/common/01_化粧品の効能効果の範囲.txt",
        "acceptable_rewrite": "明るい印象の肌へ（メーキャップ効果）",
    },
    {
        "id": "absolute.out-of-scope.kuma-senyo",
        "tier": "absolute",
        "keyword": "クマ専用",
        "category": "kuma",
        "severity": "high",
        "regulatory_class": "internal-policy",
        "rationale": "クマ専用という表現はクマへの効能を標榜するものとして社内基準で禁止されています。",
        "reference_hint": "knowledge/common/08_目の下のクマ表現について.txt",
        "acceptable_rewrite": "目元ケア用",
    },
    {
        "id": "absolute.out-of-scope.kuma-kaizen",
        "tier": "absolute",
        "keyword": ["クマが改善", "クマを改善", "クマを予防"],
        "category": "kuma",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "クマの改善・予防は医薬品的な効能効果です。",
        "reference_hint": "knowledge/common/08_目の下のクマ表現について.txt",
    },
]
