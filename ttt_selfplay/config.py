
class Config:
    # Network
    INPUT_SIZE = 18
    HIDDEN_SIZE = 100
    OUTPUT_SIZE = 9
    INIT_RANGE = 0.5  # weights drawn uniformly from (-INIT_RANGE, INIT_RANGE)

    # Training
    LEARNING_RATE = 0.1
    NUM_TRAINING_GAMES = 150_000
    REPORT_INTERVAL = 10_000

    # Terminal rewards from the learner's point of view
    WIN_REWARD = 1.0
    LOSS_REWARD = -2.0
    TIE_REWARD = 0.3

    # The learner always plays the second symbol (O)
    LEARNER_SYMBOL = -1

    # None -> fresh OS entropy
    SEED = None
