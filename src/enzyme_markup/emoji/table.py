"""標準絵文字のショートコード表

挿入順が検索結果の同順位内の並びになるため、よく使うものを先に置く。
"""

STANDARD_EMOJIS: dict[str, str] = {
    # 表情
    "smile": "😄",
    "grinning": "😀",
    "smiley": "😃",
    "grin": "😁",
    "laughing": "😆",
    "sweat_smile": "😅",
    "joy": "😂",
    "rofl": "🤣",
    "slightly_smiling_face": "🙂",
    "upside_down_face": "🙃",
    "wink": "😉",
    "blush": "😊",
    "innocent": "😇",
    "smiling_face_with_three_hearts": "🥰",
    "heart_eyes": "😍",
    "star_struck": "🤩",
    "kissing_heart": "😘",
    "yum": "😋",
    "stuck_out_tongue": "😛",
    "stuck_out_tongue_winking_eye": "😜",
    "zany_face": "🤪",
    "money_mouth_face": "🤑",
    "hugs": "🤗",
    "thinking": "🤔",
    "zipper_mouth_face": "🤐",
    "raised_eyebrow": "🤨",
    "neutral_face": "😐",
    "expressionless": "😑",
    "no_mouth": "😶",
    "smirk": "😏",
    "unamused": "😒",
    "roll_eyes": "🙄",
    "grimacing": "😬",
    "relieved": "😌",
    "pensive": "😔",
    "sleepy": "😪",
    "sleeping": "😴",
    "mask": "😷",
    "face_with_thermometer": "🤒",
    "nauseated_face": "🤢",
    "sneezing_face": "🤧",
    "hot_face": "🥵",
    "cold_face": "🥶",
    "exploding_head": "🤯",
    "cowboy_hat_face": "🤠",
    "partying_face": "🥳",
    "sunglasses": "😎",
    "nerd_face": "🤓",
    "confused": "😕",
    "worried": "😟",
    "open_mouth": "😮",
    "astonished": "😲",
    "flushed": "😳",
    "pleading_face": "🥺",
    "fearful": "😨",
    "cold_sweat": "😰",
    "cry": "😢",
    "sob": "😭",
    "scream": "😱",
    "confounded": "😖",
    "disappointed": "😞",
    "sweat": "😓",
    "weary": "😩",
    "tired_face": "😫",
    "yawning_face": "🥱",
    "triumph": "😤",
    "rage": "😡",
    "angry": "😠",
    "skull": "💀",
    "poop": "💩",
    "clown_face": "🤡",
    "ghost": "👻",
    "alien": "👽",
    "robot": "🤖",
    "see_no_evil": "🙈",
    "hear_no_evil": "🙉",
    "speak_no_evil": "🙊",
    # 手・人
    "thumbsup": "👍",
    "+1": "👍",
    "thumbsdown": "👎",
    "-1": "👎",
    "wave": "👋",
    "raised_hand": "✋",
    "ok_hand": "👌",
    "pinched_fingers": "🤌",
    "v": "✌️",
    "crossed_fingers": "🤞",
    "metal": "🤘",
    "call_me_hand": "🤙",
    "point_left": "👈",
    "point_right": "👉",
    "point_up": "☝️",
    "point_down": "👇",
    "fist": "✊",
    "punch": "👊",
    "clap": "👏",
    "raised_hands": "🙌",
    "open_hands": "👐",
    "handshake": "🤝",
    "pray": "🙏",
    "writing_hand": "✍️",
    "muscle": "💪",
    "ear": "👂",
    "nose": "👃",
    "brain": "🧠",
    "eyes": "👀",
    "eye": "👁️",
    "tongue": "👅",
    "lips": "👄",
    "tooth": "🦷",
    "bow": "🙇",
    "facepalm": "🤦",
    "shrug": "🤷",
    # ハート・記号
    "heart": "❤️",
    "orange_heart": "🧡",
    "yellow_heart": "💛",
    "green_heart": "💚",
    "blue_heart": "💙",
    "purple_heart": "💜",
    "black_heart": "🖤",
    "broken_heart": "💔",
    "sparkling_heart": "💖",
    "two_hearts": "💕",
    "100": "💯",
    "boom": "💥",
    "sparkles": "✨",
    "star": "⭐",
    "zap": "⚡",
    "fire": "🔥",
    "tada": "🎉",
    "confetti_ball": "🎊",
    "balloon": "🎈",
    "gift": "🎁",
    "trophy": "🏆",
    "medal": "🏅",
    "white_check_mark": "✅",
    "heavy_check_mark": "✔️",
    "x": "❌",
    "warning": "⚠️",
    "no_entry": "⛔",
    "question": "❓",
    "exclamation": "❗",
    "bulb": "💡",
    "bell": "🔔",
    "lock": "🔒",
    "key": "🔑",
    "link": "🔗",
    "pushpin": "📌",
    "memo": "📝",
    "calendar": "📅",
    "chart_with_upwards_trend": "📈",
    "rocket": "🚀",
    "hourglass": "⌛",
    "alarm_clock": "⏰",
    "speech_balloon": "💬",
    "thought_balloon": "💭",
    "zzz": "💤",
    # 動物・自然
    "dog": "🐶",
    "cat": "🐱",
    "mouse": "🐭",
    "rabbit": "🐰",
    "fox_face": "🦊",
    "bear": "🐻",
    "panda_face": "🐼",
    "koala": "🐨",
    "tiger": "🐯",
    "lion": "🦁",
    "cow": "🐮",
    "pig": "🐷",
    "frog": "🐸",
    "monkey": "🐒",
    "chicken": "🐔",
    "penguin": "🐧",
    "bird": "🐦",
    "owl": "🦉",
    "unicorn": "🦄",
    "bee": "🐝",
    "bug": "🐛",
    "butterfly": "🦋",
    "snail": "🐌",
    "turtle": "🐢",
    "snake": "🐍",
    "octopus": "🐙",
    "whale": "🐳",
    "dolphin": "🐬",
    "fish": "🐟",
    "crab": "🦀",
    "sunflower": "🌻",
    "rose": "🌹",
    "tulip": "🌷",
    "cherry_blossom": "🌸",
    "seedling": "🌱",
    "evergreen_tree": "🌲",
    "cactus": "🌵",
    "four_leaf_clover": "🍀",
    "maple_leaf": "🍁",
    "sunny": "☀️",
    "cloud": "☁️",
    "umbrella": "☔",
    "snowflake": "❄️",
    "rainbow": "🌈",
    "ocean": "🌊",
    "earth_americas": "🌎",
    "earth_asia": "🌏",
    "crescent_moon": "🌙",
    # 食べ物
    "apple": "🍎",
    "pear": "🍐",
    "tangerine": "🍊",
    "lemon": "🍋",
    "banana": "🍌",
    "watermelon": "🍉",
    "grapes": "🍇",
    "strawberry": "🍓",
    "peach": "🍑",
    "cherries": "🍒",
    "avocado": "🥑",
    "eggplant": "🍆",
    "carrot": "🥕",
    "corn": "🌽",
    "bread": "🍞",
    "cheese": "🧀",
    "hamburger": "🍔",
    "fries": "🍟",
    "pizza": "🍕",
    "taco": "🌮",
    "sushi": "🍣",
    "ramen": "🍜",
    "rice": "🍚",
    "bento": "🍱",
    "doughnut": "🍩",
    "cookie": "🍪",
    "cake": "🍰",
    "birthday": "🎂",
    "ice_cream": "🍨",
    "coffee": "☕",
    "tea": "🍵",
    "beer": "🍺",
    "beers": "🍻",
    "wine_glass": "🍷",
    "clinking_glasses": "🥂",
    # 活動・物
    "soccer": "⚽",
    "basketball": "🏀",
    "football": "🏈",
    "baseball": "⚾",
    "tennis": "🎾",
    "video_game": "🎮",
    "dart": "🎯",
    "art": "🎨",
    "musical_note": "🎵",
    "headphones": "🎧",
    "guitar": "🎸",
    "camera": "📷",
    "computer": "💻",
    "keyboard": "⌨️",
    "phone": "📱",
    "email": "📧",
    "package": "📦",
    "books": "📚",
    "pencil2": "✏️",
    "mag": "🔍",
    "hammer": "🔨",
    "wrench": "🔧",
    "gear": "⚙️",
    "money_with_wings": "💸",
    "moneybag": "💰",
    "house": "🏠",
    "office": "🏢",
    "car": "🚗",
    "bike": "🚲",
    "airplane": "✈️",
    "ship": "🚢",
    "construction": "🚧",
    "checkered_flag": "🏁",
}

COMMON_EMOJIS: tuple[str, ...] = (
    "thumbsup",
    "heart",
    "joy",
    "tada",
    "fire",
    "eyes",
    "pray",
    "clap",
    "white_check_mark",
    "rocket",
    "thinking",
    "100",
    "wave",
    "smile",
    "sob",
    "raised_hands",
)
