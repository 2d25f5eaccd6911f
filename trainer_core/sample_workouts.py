from datetime import timedelta
from trainer_core.workouts import running, walking, swimming


SWIM_SAMPLE = swimming(2000, timedelta(minutes=90), 85, length_pool=50, count_pool=5)
WALK_SAMPLE = walking(20000, timedelta(hours=3, minutes=45), 85, height=185)
RUN_SAMPLE = running(5000, timedelta(minutes=30), 85)

# Printing order #
SAMPLE_WORKOUTS = (SWIM_SAMPLE, WALK_SAMPLE, RUN_SAMPLE)
