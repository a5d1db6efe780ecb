"""
Product profiles. Each profile lists keywords that need a footnote only for
that product; RuleTables.for_product turns them into conditional rules.
"""

PRODUCT_PROFILES = [
    {
        "id": "HA",
        "name": "ヒアロディープパッチ",
        "category": "化粧品",
        "approved_effects": "肌を整える。肌のキメを整える。乾燥による小ジワを目立たなくする。",
        "annotation_rules": {
            "マイクロニードル": {
                "required": True,
                "template": "※ヒアルロン酸を固めて作った微細な針",
                "severity": "high",
                "reference_hint": "knowledge/HA/01_マイクロニードルの注釈について.txt",
            },
            "くすみ": {
                "required": True,
                "template": "※乾燥や汚れなどによる",
                "severity": "medium",
                "reference_hint": "knowledge/HA/03_くすみ表現について.txt",
            },
            "ハリ": {
                "required": False,
                "template": "※うるおいによる",
                "severity": "low",
            },
        },
    },
    {
        "id": "SH",
        "name": "クリアストロングショット アルファ",
        "category": "新指定医薬部外品",
        "approved_effects": "爪白癬の予防を除く、爪周りの皮膚の殺菌・消毒。",
        "annotation_rules": {
            "トッププレート": {
                "required": True,
                "template": "※背爪表面",
                "severity": "high",
                "reference_hint": "knowledge/SH/01_トッププレートの注釈について.txt",
            },
            "爪の奥": {
                "required": True,
                "template": "※背爪表面まで",
                "severity": "high",
                "reference_hint": "knowledge/SH/02_浸透表現の注釈について.txt",
            },
        },
    },
]
