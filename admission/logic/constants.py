"""
Admission Engine Constants

Defines every grade threshold, bonus table, tier list and keyword table used by
the admission engine. All values are authored heuristics - no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class LetterGrade(str, Enum):
    """11-point letter scale shared by every category and the overall grade."""
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D_PLUS = "D+"
    D = "D"


class CollegeTier(str, Enum):
    """Selectivity buckets assigned by name matching."""
    IVY_PLUS = "ivy-plus"
    TIER1 = "tier1"
    TIER2 = "tier2"
    TIER3 = "tier3"
    TIER4 = "tier4"


class ChanceLabel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# =============================================================================
# FEATURE EXTRACTION
# =============================================================================

DEFAULT_GPA = 3.0

LONG_TERM_YEARS = 3
SIGNIFICANT_HOURS_PER_WEEK = 10
RECENT_AWARD_WINDOW_YEARS = 2

LEADERSHIP_KEYWORDS: Tuple[str, ...] = (
    "president",
    "leader",
    "captain",
    "founder",
    "director",
    "editor",
    "manager",
    "chair",
)

NATIONAL_LEVELS = frozenset({"national", "international"})
STATE_LEVELS = frozenset({"state", "regional"})

# Ordered (major substring -> activity/award keywords)
MAJOR_KEYWORD_MAP: List[Tuple[str, Tuple[str, ...]]] = [
    ("computer", ("tech", "coding", "programming", "software")),
    ("engineer", ("robot", "design", "build")),
    ("biology", ("lab", "science", "research")),
    ("business", ("entrepreneur", "marketing", "finance")),
    ("art", ("design", "draw", "paint", "portfolio")),
]

# =============================================================================
# ACADEMIC GRADER (max 10.5 points)
# =============================================================================

# (minimum unweighted GPA, points); last band floor is 0.0
GPA_POINTS: List[Tuple[float, float]] = [
    (3.9, 4.0),
    (3.7, 3.5),
    (3.5, 3.0),
    (3.3, 2.5),
    (3.0, 2.0),
    (2.7, 1.5),
    (2.5, 1.0),
    (0.0, 0.5),
]

SAT_POINTS: List[Tuple[int, float]] = [
    (1550, 3.0),
    (1500, 2.75),
    (1450, 2.5),
    (1400, 2.25),
    (1300, 1.75),
    (1200, 1.25),
    (1100, 0.75),
    (1, 0.25),
]

ACT_POINTS: List[Tuple[int, float]] = [
    (35, 3.0),
    (34, 2.75),
    (33, 2.5),
    (31, 2.25),
    (28, 1.75),
    (25, 1.25),
    (22, 0.75),
    (1, 0.25),
]

# Applied instead of a test contribution when neither SAT nor ACT is reported
NO_TEST_SCORE_PENALTY = -1.0

AP_COURSE_POINTS: List[Tuple[int, float]] = [
    (10, 2.0),
    (8, 1.75),
    (6, 1.5),
    (4, 1.0),
    (2, 0.5),
    (1, 0.25),
]

COURSE_RIGOR_POINTS: Dict[str, float] = {
    "very_high": 1.0,
    "high": 0.75,
    "medium": 0.4,
    "low": 0.0,
}

RIGOR_GAP_RATE = 0.5
RIGOR_GAP_MAX = 0.5

ACADEMIC_GRADE_THRESHOLDS: List[Tuple[float, LetterGrade]] = [
    (10.0, LetterGrade.A_PLUS),
    (9.25, LetterGrade.A),
    (8.5, LetterGrade.A_MINUS),
    (7.75, LetterGrade.B_PLUS),
    (7.0, LetterGrade.B),
    (6.25, LetterGrade.B_MINUS),
    (5.5, LetterGrade.C_PLUS),
    (4.75, LetterGrade.C),
    (4.0, LetterGrade.C_MINUS),
    (3.0, LetterGrade.D_PLUS),
]

# =============================================================================
# EXTRACURRICULAR GRADER (max 11 points)
# =============================================================================

ACTIVITY_COUNT_POINTS: List[Tuple[int, float]] = [
    (6, 3.0),
    (4, 2.5),
    (3, 2.0),
    (2, 1.5),
    (1, 1.0),
]

LEADERSHIP_BONUS = 3.0
LONG_TERM_BONUS = 2.0
SIGNIFICANT_TIME_BONUS = 1.0
MAJOR_RELATED_ACTIVITY_BONUS = 2.0

EXTRACURRICULAR_GRADE_THRESHOLDS: List[Tuple[float, LetterGrade]] = [
    (8.0, LetterGrade.A_PLUS),
    (7.0, LetterGrade.A),
    (6.0, LetterGrade.A_MINUS),
    (5.5, LetterGrade.B_PLUS),
    (5.0, LetterGrade.B),
    (4.5, LetterGrade.B_MINUS),
    (4.0, LetterGrade.C_PLUS),
    (3.0, LetterGrade.C),
    (2.0, LetterGrade.C_MINUS),
    (1.0, LetterGrade.D_PLUS),
]

# =============================================================================
# AWARDS GRADER (max 11 points)
# =============================================================================

AWARD_COUNT_POINTS: List[Tuple[int, float]] = [
    (5, 3.0),
    (4, 2.5),
    (3, 2.0),
    (2, 1.5),
    (1, 1.0),
]

NATIONAL_AWARD_BONUS = 3.0
STATE_AWARD_BONUS = 2.0
RECENT_AWARD_BONUS = 1.0
MAJOR_RELATED_AWARD_BONUS = 2.0

AWARDS_GRADE_THRESHOLDS: List[Tuple[float, LetterGrade]] = [
    (8.0, LetterGrade.A_PLUS),
    (7.0, LetterGrade.A),
    (6.0, LetterGrade.A_MINUS),
    (4.0, LetterGrade.B_PLUS),
    (3.0, LetterGrade.B),
    (2.5, LetterGrade.B_MINUS),
    (2.0, LetterGrade.C_PLUS),
    (1.5, LetterGrade.C),
    (1.0, LetterGrade.C_MINUS),
    (0.5, LetterGrade.D_PLUS),
]

# =============================================================================
# OVERALL GRADE COMBINER
# =============================================================================

GRADE_NUMERIC_VALUE: Dict[LetterGrade, int] = {
    LetterGrade.A_PLUS: 12,
    LetterGrade.A: 11,
    LetterGrade.A_MINUS: 10,
    LetterGrade.B_PLUS: 9,
    LetterGrade.B: 8,
    LetterGrade.B_MINUS: 7,
    LetterGrade.C_PLUS: 6,
    LetterGrade.C: 5,
    LetterGrade.C_MINUS: 4,
    LetterGrade.D_PLUS: 3,
    LetterGrade.D: 1,
}

CATEGORY_WEIGHTS: Dict[str, float] = {
    "academic": 0.5,
    "extracurricular": 0.3,
    "awards": 0.2,
}

# Midpoints between adjacent numeric values
OVERALL_GRADE_THRESHOLDS: List[Tuple[float, LetterGrade]] = [
    (11.5, LetterGrade.A_PLUS),
    (10.5, LetterGrade.A),
    (9.5, LetterGrade.A_MINUS),
    (8.5, LetterGrade.B_PLUS),
    (7.5, LetterGrade.B),
    (6.5, LetterGrade.B_MINUS),
    (5.5, LetterGrade.C_PLUS),
    (4.5, LetterGrade.C),
    (3.5, LetterGrade.C_MINUS),
    (2.0, LetterGrade.D_PLUS),
]

# =============================================================================
# COLLEGE TIERS
# =============================================================================
# Names are lowercased and padded with one space on each side before matching,
# so entries with surrounding spaces only match whole words.

IVY_PLUS_COLLEGES: Tuple[str, ...] = (
    "harvard",
    "yale",
    "princeton",
    "stanford",
    " mit ",
    "massachusetts institute of technology",
    "caltech",
    "california institute of technology",
    "columbia",
    "university of chicago",
    " uchicago ",
    "university of pennsylvania",
    " upenn ",
    "brown university",
    " brown ",
    "dartmouth",
    "cornell",
    "duke",
)

TIER1_COLLEGES: Tuple[str, ...] = (
    "northwestern",
    "johns hopkins",
    "rice university",
    " rice ",
    "vanderbilt",
    "notre dame",
    "washington university in st",
    " washu ",
    " wustl ",
    "georgetown",
    "carnegie mellon",
    "emory",
    "berkeley",
    " ucla ",
    "university of california, los angeles",
    "university of michigan",
    " umich ",
    "university of virginia",
    " uva ",
    " usc ",
    "university of southern california",
    "tufts",
    "new york university",
    " nyu ",
    "williams college",
    "amherst",
    "swarthmore",
    "pomona",
)

TIER2_COLLEGES: Tuple[str, ...] = (
    "boston college",
    "boston university",
    "georgia tech",
    "georgia institute of technology",
    "university of north carolina",
    " unc ",
    "university of rochester",
    "case western",
    "university of florida",
    "university of texas",
    " ut austin ",
    "wake forest",
    "university of wisconsin",
    "university of illinois",
    "uc san diego",
    " ucsd ",
    "uc davis",
    "uc irvine",
    "brandeis",
    "northeastern",
    "william & mary",
    "william and mary",
    "university of washington",
    "ohio state",
    "purdue",
    "rensselaer",
    " rpi ",
    "lehigh",
    "villanova",
    "wellesley",
    "bowdoin",
    "middlebury",
    "carleton",
    "claremont mckenna",
    "harvey mudd",
    "davidson",
    "haverford",
)

TIER3_COLLEGES: Tuple[str, ...] = (
    "penn state",
    "pennsylvania state",
    "rutgers",
    "university of maryland",
    "university of minnesota",
    "university of pittsburgh",
    "texas a&m",
    "indiana university",
    "michigan state",
    "university of georgia",
    "virginia tech",
    "clemson",
    "university of connecticut",
    " uconn ",
    "syracuse",
    "fordham",
    "university of massachusetts",
    " umass ",
    "university of colorado",
    "arizona state",
    "university of arizona",
    "university of iowa",
    "uc santa barbara",
    " ucsb ",
    "university of delaware",
    "george washington",
    "tulane",
    "baylor",
    "university of miami",
    "grinnell",
    "vassar",
    "colby",
    "hamilton college",
    "colgate",
    "wesleyan",
    "barnard",
    "smith college",
)

# Check order: first matching tier wins
TIER_LISTS: List[Tuple[CollegeTier, Tuple[str, ...]]] = [
    (CollegeTier.IVY_PLUS, IVY_PLUS_COLLEGES),
    (CollegeTier.TIER1, TIER1_COLLEGES),
    (CollegeTier.TIER2, TIER2_COLLEGES),
    (CollegeTier.TIER3, TIER3_COLLEGES),
]

DEFAULT_TIER = CollegeTier.TIER4

PUBLIC_UNIVERSITY_MARKERS: Tuple[str, ...] = (" state ", "university of ", " tech ")

TIER_COLORS: Dict[CollegeTier, str] = {
    CollegeTier.IVY_PLUS: "purple-600",
    CollegeTier.TIER1: "blue-600",
    CollegeTier.TIER2: "indigo-500",
    CollegeTier.TIER3: "teal-500",
    CollegeTier.TIER4: "gray-500",
}

# =============================================================================
# SPECIAL FIT RULES
# =============================================================================

STEM_FOCUSED_COLLEGES: Tuple[str, ...] = (
    " mit ",
    "massachusetts institute of technology",
    "caltech",
    "california institute of technology",
    "carnegie mellon",
    "georgia tech",
    "georgia institute of technology",
    "harvey mudd",
    "rensselaer",
    " rpi ",
    "worcester polytechnic",
    " wpi ",
    "olin college",
    "rose-hulman",
    "colorado school of mines",
    "stevens institute",
    " tech ",
)

STEM_MAJOR_KEYWORDS: Tuple[str, ...] = (
    "computer",
    "engineer",
    "math",
    "physics",
    "chemistry",
    "data",
    "science",
    "technology",
)

LIBERAL_ARTS_COLLEGES: Tuple[str, ...] = (
    "williams college",
    "amherst",
    "swarthmore",
    "pomona",
    "wellesley",
    "bowdoin",
    "middlebury",
    "carleton",
    "claremont mckenna",
    "davidson",
    "haverford",
    "grinnell",
    "vassar",
    "colby",
    "hamilton college",
    "colgate",
    "wesleyan",
    "barnard",
    "smith college",
)

LIBERAL_ARTS_MAJOR_KEYWORDS: Tuple[str, ...] = (
    "english",
    "history",
    "philosophy",
    "literature",
    "political",
    "psychology",
    "sociology",
    "anthropology",
    "classics",
    "language",
    "music",
    "art",
)

BUSINESS_SCHOOL_COLLEGES: Tuple[str, ...] = (
    "wharton",
    "stern school",
    "ross school",
    "haas",
    "mcdonough",
    "kelley",
    "mccombs",
    "olin business",
    "marshall school",
    "tepper",
    "babson",
    "bentley",
)

BUSINESS_MAJOR_KEYWORDS: Tuple[str, ...] = (
    "business",
    "finance",
    "economics",
    "accounting",
    "marketing",
    "management",
    "entrepreneur",
)

STEM_FIT_MIN_GPA = 3.9
STEM_FIT_MIN_SAT = 1500
STEM_FIT_MIN_ACT = 34

LIBERAL_ARTS_FIT_MIN_GPA = 3.8
LIBERAL_ARTS_FIT_MIN_ACTIVITIES = 3

BUSINESS_FIT_MIN_GPA = 3.7

SPECIAL_FIT_BONUS = 5

# =============================================================================
# CHANCE CALCULATOR
# =============================================================================

TIER_BASE_PERCENTAGE: Dict[CollegeTier, int] = {
    CollegeTier.IVY_PLUS: 1,
    CollegeTier.TIER1: 4,
    CollegeTier.TIER2: 12,
    CollegeTier.TIER3: 25,
    CollegeTier.TIER4: 40,
}

IN_STATE_PUBLIC_BONUS = 15
OUT_OF_STATE_PUBLIC_PENALTY = -5
OUT_OF_STATE_PENALTY_TIERS = frozenset({CollegeTier.TIER1, CollegeTier.TIER2})

ACADEMIC_CHANCE_BONUS: Dict[LetterGrade, int] = {
    LetterGrade.A_PLUS: 12,
    LetterGrade.A: 9,
    LetterGrade.A_MINUS: 6,
    LetterGrade.B_PLUS: 3,
    LetterGrade.B: 0,
    LetterGrade.B_MINUS: -3,
    LetterGrade.C_PLUS: -6,
    LetterGrade.C: -9,
    LetterGrade.C_MINUS: -12,
    LetterGrade.D_PLUS: -14,
    LetterGrade.D: -15,
}

EXTRACURRICULAR_CHANCE_BONUS: Dict[LetterGrade, int] = {
    LetterGrade.A_PLUS: 7,
    LetterGrade.A: 5,
    LetterGrade.A_MINUS: 4,
    LetterGrade.B_PLUS: 2,
    LetterGrade.B: 0,
    LetterGrade.B_MINUS: -2,
    LetterGrade.C_PLUS: -4,
    LetterGrade.C: -5,
    LetterGrade.C_MINUS: -7,
    LetterGrade.D_PLUS: -9,
    LetterGrade.D: -10,
}

AWARDS_CHANCE_BONUS: Dict[LetterGrade, int] = {
    LetterGrade.A_PLUS: 4,
    LetterGrade.A: 3,
    LetterGrade.A_MINUS: 2,
    LetterGrade.B_PLUS: 1,
    LetterGrade.B: 0,
    LetterGrade.B_MINUS: -1,
    LetterGrade.C_PLUS: -1,
    LetterGrade.C: -2,
    LetterGrade.C_MINUS: -2,
    LetterGrade.D_PLUS: -3,
    LetterGrade.D: -3,
}

MIN_CHANCE_PERCENTAGE = 1
MAX_CHANCE_PERCENTAGE = 95

HIGH_CHANCE_THRESHOLD = 80
MEDIUM_CHANCE_THRESHOLD = 55

CHANCE_COLORS: Dict[ChanceLabel, str] = {
    ChanceLabel.HIGH: "green-500",
    ChanceLabel.MEDIUM: "yellow-500",
    ChanceLabel.LOW: "red-500",
}

# Per tier: (minimum percentage, template), highest band first
CHANCE_FEEDBACK_TEMPLATES: Dict[CollegeTier, List[Tuple[int, str]]] = {
    CollegeTier.IVY_PLUS: [
        (15, "{college} admits only a tiny fraction of applicants, but your profile is among the strongest in the pool. "
             "Focus on essays that show intellectual depth and a distinctive voice."),
        (6, "{college} is extremely selective even for students with top credentials. "
            "Your profile is competitive, so treat it as a reach and pair it with strong target schools."),
        (0, "{college} is one of the most selective schools in the country. "
            "Your current profile makes admission a long shot; keep it on your list as a reach only."),
    ],
    CollegeTier.TIER1: [
        (30, "Your profile stands out for {college}. Admission is still competitive, "
             "so make sure your essays connect your activities to your intended major."),
        (12, "{college} is highly selective. You are a plausible applicant, "
             "but strengthening your weakest category would meaningfully improve your odds."),
        (0, "{college} is a significant reach with your current profile. "
            "Consider applying early or adding more schools with higher acceptance rates."),
    ],
    CollegeTier.TIER2: [
        (45, "You are a strong candidate for {college}. Highlight your leadership and "
             "major-related work to stand out from similarly qualified applicants."),
        (25, "You have a realistic chance at {college}. A stronger test score or a "
             "deeper commitment in one activity could move you into a comfortable range."),
        (0, "{college} is a reach for your current profile. "
            "Improving your academic record would have the biggest impact here."),
    ],
    CollegeTier.TIER3: [
        (65, "Your academic record and activities make you a competitive candidate for {college}. "
             "It is a solid target school for you."),
        (40, "You have a reasonable chance at {college}. A focused application that "
             "shows genuine interest in the school should help."),
        (0, "{college} may be a stretch with your current profile. "
            "Raising your grades and test scores would improve your chances."),
    ],
    CollegeTier.TIER4: [
        (80, "{college} looks like a likely admit based on your profile. "
             "Consider it a safety school and look into merit scholarships."),
        (55, "You have a good chance at {college}. Submit a complete, careful application "
             "and you should be well positioned."),
        (0, "Your chances at {college} are uncertain. Strengthening your academics "
            "and activities would improve your odds."),
    ],
}

# =============================================================================
# IMPROVEMENT PLAN
# =============================================================================

MAX_IMPROVEMENT_PLAN_ITEMS = 10

PLAN_TARGET_GPA = 3.7
PLAN_TARGET_SAT = 1400
PLAN_TARGET_ACT = 31
PLAN_TARGET_AP_COURSES = 5
PLAN_MIN_ACTIVITIES = 3
PLAN_MIN_AWARDS = 2

REACH_TIERS = frozenset({CollegeTier.IVY_PLUS, CollegeTier.TIER1})
SAFETY_TIERS = frozenset({CollegeTier.TIER3, CollegeTier.TIER4})

# Ordered (major keywords -> advice); first match wins
MAJOR_SPECIFIC_ADVICE: List[Tuple[Tuple[str, ...], str]] = [
    (
        ("computer", "software", "data", "information"),
        "MAJOR-SPECIFIC: Build and publish coding projects on GitHub, compete in USACO or hackathons, "
        "and take AP Computer Science A and AP Calculus BC to show readiness for a computing curriculum.",
    ),
    (
        ("engineer",),
        "MAJOR-SPECIFIC: Join or lead a robotics or engineering design team, document a hands-on build "
        "project, and take AP Physics C and AP Calculus BC to demonstrate quantitative preparation.",
    ),
    (
        ("biology", "medicine", "pre-med", "premed", "health", "nursing", "chemistry", "neuro"),
        "MAJOR-SPECIFIC: Seek out a research internship or lab position, volunteer in a clinical or "
        "community health setting, and take AP Biology and AP Chemistry.",
    ),
    (
        ("business", "economics", "finance", "accounting", "marketing", "management"),
        "MAJOR-SPECIFIC: Start a small venture or fundraising initiative, compete in DECA or FBLA, "
        "and take AP Economics and AP Statistics to show business aptitude.",
    ),
    (
        ("art", "design", "music", "film", "theater", "theatre", "photography"),
        "MAJOR-SPECIFIC: Develop a strong portfolio of original work, enter juried exhibitions or "
        "competitions such as Scholastic Art & Writing, and attend a summer arts intensive.",
    ),
    (
        ("english", "history", "political", "philosophy", "literature", "journalism", "writing"),
        "MAJOR-SPECIFIC: Publish your writing in school or outside publications, compete in debate or "
        "Model UN, and pursue an independent research paper in your area of interest.",
    ),
    (
        ("math", "physics", "statistics", "astronomy"),
        "MAJOR-SPECIFIC: Compete in the AMC/AIME or Physics Olympiad, take college-level coursework "
        "beyond AP, and pursue a mentored research project.",
    ),
]

# =============================================================================
# OUTPUT
# =============================================================================

ENGINE_VERSION = "1.0.0"

FALLBACK_NOTE = (
    "Using AI advisor simulation due to API limitations. "
    "For full AI analysis, please check your API key or try again later."
)
