from types import MappingProxyType

from .base import CourtLevel, LawyerType, LegalCategory, QuestionPair

CATEGORY_NAMES = MappingProxyType({
    LegalCategory.CRIMINAL: "Criminal Law / القانون الجنائي",
    LegalCategory.FAMILY: "Family Law / قانون الأسرة",
    LegalCategory.CIVIL: "Civil Law / القانون المدني",
    LegalCategory.COMMERCIAL: "Commercial Law / القانون التجاري",
    LegalCategory.ADMINISTRATIVE: "Administrative Law / القانون الإداري",
    LegalCategory.LABOR: "Labor Law / قانون العمل",
    LegalCategory.IMMIGRATION: "Immigration Law / قانون الهجرة",
})

COURT_NAMES = MappingProxyType({
    CourtLevel.FIRST_INSTANCE: "First Instance Court / المحكمة الابتدائية",
    CourtLevel.APPEAL: "Court of Appeal / محكمة الاستئناف",
    CourtLevel.SUPREME_COURT: "Supreme Court / المحكمة العليا",
    CourtLevel.COUNCIL_OF_STATE: "Council of State / مجلس الدولة",
})

LAWYER_NAMES = MappingProxyType({
    LawyerType.REGULAR: "lawyers authorized for first instance courts",
    LawyerType.APPEAL: "lawyers authorized for appellate courts",
    LawyerType.SUPREME_COURT: "lawyers authorized for Supreme Court",
    LawyerType.COUNCIL_OF_STATE: "lawyers authorized for Council of State",
})

# Follow-up questions

NEW_CASE_OR_APPEAL = QuestionPair(
    en="Is this a new case, or are you appealing a previous decision?",
    ar="هل هذه قضية جديدة، أم أنك تستأنف حكمًا سابقًا؟",
)

FORMALLY_CHARGED = QuestionPair(
    en="Have you been formally charged with any crime?",
    ar="هل تم توجيه اتهام رسمي لك؟",
)

CHILDREN_INVOLVED = QuestionPair(
    en="Are there children involved in this matter?",
    ar="هل هناك أطفال معنيون بهذا الأمر؟",
)

GOVERNMENT_BODY = QuestionPair(
    en="Is this dispute with a government agency or public body?",
    ar="هل النزاع مع هيئة حكومية أو جهة عامة؟",
)

EMPLOYMENT_STATUS = QuestionPair(
    en="Are you currently employed or have you been terminated?",
    ar="هل أنت موظف حاليًا أم تم فصلك؟",
)

PREVIOUS_JUDGMENT = QuestionPair(
    en="Do you have a copy of the previous court judgment?",
    ar="هل لديك نسخة من الحكم السابق؟",
)
