"""
Parallel translation tables for multi-language field families.

Entries at the same index in every language column describe the same
entity, e.g. ``CITIES["en"][2]`` and ``CITIES["ar"][2]`` are both Paris.
"""

FIRST_NAMES: dict[str, list[str]] = {
    "en": ["Alice", "Bob", "Charlie", "Diana", "Ethan", "Fiona", "George", "Hannah"],
    "ar": ["أليس", "بوب", "تشارلي", "ديانا", "إيثان", "فيونا", "جورج", "هانا"],
    "fr": ["Alice", "Bob", "Charlie", "Diane", "Étienne", "Fiona", "Georges", "Hannah"],
    "es": ["Alicia", "Roberto", "Carlos", "Diana", "Ethan", "Fiona", "Jorge", "Ana"],
    "de": ["Alice", "Bob", "Charlie", "Diana", "Ethan", "Fiona", "Georg", "Hannah"],
    "zh": ["爱丽丝", "鲍勃", "查理", "戴安娜", "伊桑", "菲奥娜", "乔治", "汉娜"],
    "ja": ["アリス", "ボブ", "チャーリー", "ダイアナ", "イーサン", "フィオナ", "ジョージ", "ハンナ"],
    "ru": ["Элис", "Боб", "Чарли", "Диана", "Итан", "Фиона", "Джордж", "Ханна"],
}

LAST_NAMES: dict[str, list[str]] = {
    "en": ["Smith", "Johnson", "Brown", "Taylor", "Anderson", "Thomas", "Jackson", "White"],
    "ar": ["سميث", "جونسون", "براون", "تايلور", "أندرسون", "توماس", "جاكسون", "وايت"],
    "fr": ["Smith", "Johnson", "Brown", "Taylor", "Anderson", "Thomas", "Jackson", "White"],
    "es": ["Smith", "Johnson", "Brown", "Taylor", "Anderson", "Thomas", "Jackson", "White"],
    "de": ["Schmidt", "Johnson", "Braun", "Schneider", "Anderson", "Thomas", "Wagner", "Weiss"],
    "zh": ["史密斯", "约翰逊", "布朗", "泰勒", "安德森", "托马斯", "杰克逊", "怀特"],
    "ja": ["スミス", "ジョンソン", "ブラウン", "テイラー", "アンダーソン", "トーマス", "ジャクソン", "ホワイト"],
    "ru": ["Смит", "Джонсон", "Браун", "Тейлор", "Андерсон", "Томас", "Джексон", "Уайт"],
}

# Languages that write the family name first; zh omits the separator
FAMILY_NAME_FIRST = {"zh": "", "ja": " "}

CITIES: dict[str, list[str]] = {
    "en": ["New York", "London", "Paris", "Tokyo", "Dubai", "Singapore", "Sydney", "Mumbai"],
    "ar": ["نيويورك", "لندن", "باريس", "طوكيو", "دبي", "سنغافورة", "سيدني", "مومباي"],
    "fr": ["New York", "Londres", "Paris", "Tokyo", "Dubaï", "Singapour", "Sydney", "Mumbai"],
    "es": ["Nueva York", "Londres", "París", "Tokio", "Dubái", "Singapur", "Sídney", "Bombay"],
    "de": ["New York", "London", "Paris", "Tokio", "Dubai", "Singapur", "Sydney", "Mumbai"],
    "zh": ["纽约", "伦敦", "巴黎", "东京", "迪拜", "新加坡", "悉尼", "孟买"],
}

STATUSES: dict[str, list[str]] = {
    "en": ["Active", "Inactive", "Pending", "Completed", "Cancelled"],
    "ar": ["نشط", "غير نشط", "معلق", "مكتمل", "ملغي"],
    "fr": ["Actif", "Inactif", "En attente", "Terminé", "Annulé"],
    "es": ["Activo", "Inactivo", "Pendiente", "Completado", "Cancelado"],
    "de": ["Aktiv", "Inaktiv", "Ausstehend", "Abgeschlossen", "Storniert"],
    "zh": ["活跃", "不活跃", "待定", "已完成", "已取消"],
}

DEPARTMENTS: dict[str, list[str]] = {
    "en": ["Sales", "Marketing", "Engineering", "HR", "Finance", "Operations", "IT", "Customer Service"],
    "ar": ["المبيعات", "التسويق", "الهندسة", "الموارد البشرية", "المالية", "العمليات", "تقنية المعلومات", "خدمة العملاء"],
    "fr": ["Ventes", "Marketing", "Ingénierie", "RH", "Finance", "Opérations", "IT", "Service Client"],
    "es": ["Ventas", "Marketing", "Ingeniería", "RRHH", "Finanzas", "Operaciones", "IT", "Atención al Cliente"],
    "de": ["Vertrieb", "Marketing", "Technik", "HR", "Finanzen", "Betrieb", "IT", "Kundenservice"],
    "zh": ["销售", "市场营销", "工程", "人力资源", "财务", "运营", "信息技术", "客户服务"],
}

PRODUCT_PREFIXES: dict[str, str] = {
    "en": "Product",
    "ar": "منتج",
    "fr": "Produit",
    "es": "Producto",
    "de": "Produkt",
    "zh": "产品",
}

# Sample-text templates keyed by language; ``{base}`` is the field base name
TEXT_TEMPLATES: dict[str, str] = {
    "ar": "نص تجريبي {base}",
    "fr": "Texte d'exemple pour {base}",
    "es": "Texto de muestra para {base}",
    "de": "Beispieltext für {base}",
    "zh": "{base}的示例文本",
    "ja": "{base}のサンプルテキスト",
    "ru": "Пример текста для {base}",
}

# Arabic text that references the English value of the same family
ARABIC_TRANSLATION_TEMPLATE = "ترجمة عربية لـ {english}"
