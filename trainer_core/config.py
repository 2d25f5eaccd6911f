M_IN_KM = 1000          # metres in a kilometre
MIN_IN_HOUR = 60        # minutes in an hour
SEC_IN_HOUR = 3600      # seconds in an hour
CM_IN_M = 100           # centimetres in a metre

LEN_STEP = 0.65             # default step length (m)
SWIMMING_LEN_STEP = 1.38    # default stroke length (m)

# Running calories #
RUN_SPEED_MULTIPLIER = 18.0
RUN_SPEED_SHIFT = 1.79

# Walking calories #
WALK_WEIGHT_MULTIPLIER = 0.035
WALK_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = M_IN_KM / SEC_IN_HOUR     # km/h -> m/s

# Swimming calories #
SWIM_SPEED_SHIFT = 1.1
SWIM_WEIGHT_MULTIPLIER = 2.0
