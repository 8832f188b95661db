from enum import Enum, auto

class UIState(Enum):
    INTRO = auto()
    SORTING = auto()

class AppState:
    def __init__(self):
        self.current_state = UIState.INTRO
        self.input_text = ""
        self.input_active = False
        self.narrative = []  # Lines shown in the narrative panel
