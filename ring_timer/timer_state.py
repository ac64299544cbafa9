from enum import Enum

class TimerState(Enum):
    Idle = 0
    Running = 1
    Paused = 2
    Complete = 3
