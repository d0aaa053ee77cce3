"""
Built-in lesson content used when the backend cannot be reached.

Both payloads are shaped like GET /api/lessons/{id} responses so they go
through the same mapping as remote content. Neither collection is empty.
"""

MOCK_VOCABULARY = [
    {"id": 1, "word": "你好", "pinyin": "nǐ hǎo", "meaning": "Chào bạn"},
    {"id": 2, "word": "谢谢", "pinyin": "xiè xiè", "meaning": "Cảm ơn"},
    {"id": 3, "word": "再见", "pinyin": "zài jiàn", "meaning": "Tạm biệt"},
    {"id": 4, "word": "对不起", "pinyin": "duì bù qǐ", "meaning": "Xin lỗi"},
    {"id": 5, "word": "没关系", "pinyin": "méi guān xì", "meaning": "Không sao"},
    {"id": 6, "word": "请", "pinyin": "qǐng", "meaning": "Xin vui lòng"},
    {"id": 7, "word": "是", "pinyin": "shì", "meaning": "Là / Đúng"},
    {"id": 8, "word": "不", "pinyin": "bù", "meaning": "Không"},
    {"id": 9, "word": "好", "pinyin": "hǎo", "meaning": "Tốt"},
    {"id": 10, "word": "我", "pinyin": "wǒ", "meaning": "Tôi"},
    {"id": 11, "word": "你", "pinyin": "nǐ", "meaning": "Bạn"},
    {"id": 12, "word": "他", "pinyin": "tā", "meaning": "Anh ấy"},
]

MOCK_GRAMMAR_VOCABULARY = [
    {
        "id": 101,
        "word": "喜欢",
        "pinyin": "xǐhuān",
        "meaning": "Thích",
        "examples": [{
            "id": 1,
            "chinese": "我喜欢喝茶。",
            "pinyin": "Wǒ xǐhuān hē chá.",
            "vietnamese": "Tôi thích uống trà.",
            "keyword": "喜欢",
            "keyword_pinyin": "xǐhuān",
            "image_url": "https://images.unsplash.com/photo-1576092768241-dec231879fc3?w=400",
        }],
    },
    {
        "id": 102,
        "word": "朋友",
        "pinyin": "péngyou",
        "meaning": "Bạn bè",
        "examples": [{
            "id": 2,
            "chinese": "他是我的朋友。",
            "pinyin": "Tā shì wǒ de péngyou.",
            "vietnamese": "Anh ấy là bạn của tôi.",
            "keyword": "朋友",
            "keyword_pinyin": "péngyou",
            "image_url": "https://images.unsplash.com/photo-1529156069898-49953e39b3ac?w=400",
        }],
    },
    {
        "id": 103,
        "word": "天气",
        "pinyin": "tiānqì",
        "meaning": "Thời tiết",
        "examples": [{
            "id": 3,
            "chinese": "今天天气很好。",
            "pinyin": "Jīntiān tiānqì hěn hǎo.",
            "vietnamese": "Hôm nay thời tiết rất đẹp.",
            "keyword": "天气",
            "keyword_pinyin": "tiānqì",
            "image_url": "https://images.unsplash.com/photo-1601297183305-6df142704ea2?w=400",
        }],
    },
    {
        "id": 104,
        "word": "苹果",
        "pinyin": "píngguǒ",
        "meaning": "Quả táo",
        "examples": [{
            "id": 4,
            "chinese": "我想吃苹果。",
            "pinyin": "Wǒ xiǎng chī píngguǒ.",
            "vietnamese": "Tôi muốn ăn táo.",
            "keyword": "苹果",
            "keyword_pinyin": "píngguǒ",
        }],
    },
    {
        "id": 105,
        "word": "中文",
        "pinyin": "zhōngwén",
        "meaning": "Tiếng Trung",
        "examples": [{
            "id": 5,
            "chinese": "她会说中文。",
            "pinyin": "Tā huì shuō zhōngwén.",
            "vietnamese": "Cô ấy biết nói tiếng Trung.",
            "keyword": "中文",
            "keyword_pinyin": "zhōngwén",
            "image_url": "https://images.unsplash.com/photo-1434030216411-0b793f4b4173?w=400",
        }],
    },
]


def mock_vocabulary_payload() -> dict:
    return {"vocabulary": [dict(entry) for entry in MOCK_VOCABULARY]}


def mock_grammar_payload() -> dict:
    return {"vocabulary": [dict(entry) for entry in MOCK_GRAMMAR_VOCABULARY]}
