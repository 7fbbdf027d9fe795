from .base import CourtLevel, KeywordSet

APPEAL = KeywordSet(
    label=CourtLevel.APPEAL.value,
    keywords=(
        "appeal",
        "استئناف",
        "appellate",
        "محكمة الاستئناف",
        "court of appeal",
        "second instance",
        "الدرجة الثانية",
    ),
)

SUPREME_COURT = KeywordSet(
    label=CourtLevel.SUPREME_COURT.value,
    keywords=(
        "supreme court",
        "المحكمة العليا",
        "cour suprême",
        "cassation",
        "نقض",
        "final judgment",
        "حكم نهائي",
        "highest court",
        "المحكمة الأعلى",
    ),
)

COUNCIL_OF_STATE = KeywordSet(
    label=CourtLevel.COUNCIL_OF_STATE.value,
    keywords=(
        "council of state",
        "مجلس الدولة",
        "conseil d'état",
        "administrative court",
        "المحكمة الإدارية",
        "government dispute",
        "نزاع إداري",
        "public administration",
        "الإدارة العامة",
    ),
)
