"""Application constants."""

# Muscle groups offered by the logging form. "Other" collects free text.
OTHER_MUSCLE_GROUP = "Other"

MUSCLE_GROUPS = (
    "Abdominals",
    "Abductors",
    "Adductors",
    "Biceps",
    "Calves",
    "Chest",
    "Forearms",
    "Glutes",
    "Hamstrings",
    "Lats",
    "Lower back",
    "Middle back",
    "Neck",
    "Quadriceps",
    "Shoulders",
    "Traps",
    "Triceps",
    OTHER_MUSCLE_GROUP,
)

# Chart dataset label suffix (e.g. "Bench Press Total Volume")
CHART_LABEL_SUFFIX = "Total Volume"
