"""Game rules, layout values, resource paths and sound names."""

MAX_HAND_SIZE = 10
MAX_FIELD_SIZE = 7
MAX_MANA = 10
STARTING_HAND_SIZE = 3
TURN_TIME_LIMIT = 90

CARD_SCALE = 0.8
CARD_SPACING = 80.0
FIELD_SPACING = 100.0
ANIMATION_DURATION = 0.3

RECONNECT_ATTEMPTS = 3
RECONNECT_DELAY = 2.0
NETWORK_TIMEOUT_MS = 5000


class Resources:
    """Paths of image and font resources."""

    CARD_FRAME = "cards/frame.png"
    CARD_BACK = "cards/card_back.png"
    BUTTON_NORMAL = "buttons/button_normal.png"
    BUTTON_PRESSED = "buttons/button_pressed.png"
    BACKGROUND = "backgrounds/game_bg.png"
    BACKGROUND_SETTING = "backgrounds/Background_For_Setting.png"
    BACKGROUND_SELECTCARDS = "backgrounds/BackGround_For_SelectCards.png"
    BACKGROUND_DECKBUILDER = "backgrounds/Background_For_DeckBuilder.png"
    FONT_PATH = "fonts/arial.ttf"


class AnimationTiming:
    """Durations of card animations, in seconds."""

    CARD_DRAW_DURATION = 0.5
    CARD_PLAY_DURATION = 0.3
    ATTACK_DURATION = 0.4
    DAMAGE_DURATION = 0.2
    HEAL_DURATION = 0.3


class Sound:
    """Paths of sound effects and background music."""

    CARD_DRAW = "sounds/card_draw.mp3"
    CARD_PLAY = "sounds/card_play.mp3"
    ATTACK = "sounds/attack.mp3"
    DAMAGE = "sounds/damage.mp3"
    VICTORY = "sounds/victory.mp3"
    DEFEAT = "sounds/defeat.mp3"
    MAIN_MENU_THREEBUTTON_CLICK = "sounds/Main_Menu_ThreeButton_Click.ogg"
    MAIN_MENU_BUTTON_HOVER = "sounds/Main_Menu_Botton_Over.ogg"
    CHANGE_SCENE_FROM_MAIN = "sounds/Change_Scene_From_Main.ogg"
    ENTER_MYCOLLECTION = "sounds/Enter_MyCollection.ogg"
    CHANGE_HELP_SCENE = "sounds/Enter_Help.ogg"
    MENU_OPEN = "sounds/menu_open.mp3"
    MENU_CLOSE = "sounds/menu_close.mp3"
    MENU_BGM = "music/menu_bgm.mp3"
    GAME_BGM = "music/game_bgm.mp3"