from .base import KeywordSet, LegalCategory

# Declaration order matters: on equal scores the earlier category wins.

CRIMINAL = KeywordSet(
    label=LegalCategory.CRIMINAL.value,
    keywords=(
        "crime",
        "جريمة",
        "جنحة",
        "criminal",
        "جنائي",
        "arrest",
        "اعتقال",
        "police",
        "شرطة",
        "theft",
        "سرقة",
        "assault",
        "اعتداء",
        "murder",
        "قتل",
        "fraud",
        "احتيال",
        "drugs",
        "مخدرات",
    ),
)

FAMILY = KeywordSet(
    label=LegalCategory.FAMILY.value,
    keywords=(
        "divorce",
        "طلاق",
        "custody",
        "حضانة",
        "marriage",
        "زواج",
        "child",
        "طفل",
        "أطفال",
        "alimony",
        "نفقة",
        "inheritance",
        "ميراث",
        "وراثة",
    ),
)

CIVIL = KeywordSet(
    label=LegalCategory.CIVIL.value,
    keywords=(
        "contract",
        "عقد",
        "property",
        "ملكية",
        "عقار",
        "dispute",
        "نزاع",
        "injury",
        "إصابة",
        "damage",
        "ضرر",
        "neighbor",
        "جار",
        "debt",
        "دين",
    ),
)

COMMERCIAL = KeywordSet(
    label=LegalCategory.COMMERCIAL.value,
    keywords=(
        "business",
        "تجارة",
        "company",
        "شركة",
        "trade",
        "تجاري",
        "commercial",
        "corporation",
        "مؤسسة",
        "bankruptcy",
        "إفلاس",
        "partnership",
        "شراكة",
    ),
)

ADMINISTRATIVE = KeywordSet(
    label=LegalCategory.ADMINISTRATIVE.value,
    keywords=(
        "government",
        "حكومة",
        "permit",
        "رخصة",
        "تصريح",
        "license",
        "administrative",
        "إداري",
        "public",
        "عام",
        "ministry",
        "وزارة",
        "municipality",
        "بلدية",
    ),
)

LABOR = KeywordSet(
    label=LegalCategory.LABOR.value,
    keywords=(
        "work",
        "عمل",
        "job",
        "وظيفة",
        "employee",
        "موظف",
        "عامل",
        "salary",
        "راتب",
        "أجر",
        "fired",
        "termination",
        "فصل",
        "طرد",
        "workplace",
        "مكان العمل",
    ),
)

IMMIGRATION = KeywordSet(
    label=LegalCategory.IMMIGRATION.value,
    keywords=(
        "visa",
        "تأشيرة",
        "passport",
        "جواز سفر",
        "immigration",
        "هجرة",
        "residency",
        "إقامة",
        "citizenship",
        "جنسية",
        "deportation",
        "ترحيل",
    ),
)
