"""Bundled emoji dataset.

Each row is (glyph, name, keywords, shortcodes). Order is the natural
order shown for an empty emoji query.
"""

EMOJI_ROWS = (
    ("🔥", "fire", ("hot", "flame", "lit"), (":fire:",)),
    ("😀", "grinning", ("happy", "smile", "grin"), (":grinning:",)),
    ("😂", "laughing", ("lol", "laugh", "tears", "joy"), (":joy:",)),
    ("❤️", "heart", ("love", "red", "like"), (":heart:",)),
    ("👍", "thumbs up", ("like", "yes", "approve", "ok"), (":+1:", ":thumbsup:")),
    ("👎", "thumbs down", ("dislike", "no", "disapprove"), (":-1:", ":thumbsdown:")),
    ("🎉", "party", ("celebrate", "tada", "congratulations"), (":tada:",)),
    ("✨", "sparkles", ("shine", "magic", "new"), (":sparkles:",)),
    ("⭐", "star", ("favorite", "rating"), (":star:",)),
    ("😊", "smiling", ("happy", "blush", "pleased"), (":blush:",)),
    ("😍", "heart eyes", ("love", "crush", "adore"), (":heart_eyes:",)),
    ("🤔", "thinking", ("hmm", "wonder", "consider"), (":thinking:",)),
    ("😎", "cool", ("sunglasses", "awesome"), (":sunglasses:",)),
    ("🎯", "target", ("goal", "bullseye", "direct hit"), (":dart:",)),
    ("🚀", "rocket", ("launch", "ship", "fast", "space"), (":rocket:",)),
    ("💡", "lightbulb", ("idea", "bright", "tip"), (":bulb:",)),
    ("✅", "checkmark", ("done", "check", "yes", "complete"), (":white_check_mark:",)),
    ("❌", "cross", ("no", "wrong", "cancel", "delete"), (":x:",)),
    ("🎨", "art", ("paint", "palette", "design", "creative"), (":art:",)),
    ("🎵", "music", ("note", "song", "melody"), (":musical_note:",)),
    ("📝", "memo", ("note", "write", "pencil", "document"), (":memo:",)),
    ("📷", "camera", ("photo", "picture", "snapshot"), (":camera:",)),
    ("🌍", "earth", ("world", "globe", "planet"), (":earth_africa:",)),
    ("🌟", "glowing star", ("shine", "sparkle", "star"), (":star2:",)),
    ("💻", "computer", ("laptop", "code", "work"), (":computer:",)),
    ("📱", "phone", ("mobile", "cell", "smartphone"), (":iphone:",)),
    ("🎮", "game", ("gaming", "controller", "play"), (":video_game:",)),
    ("🍕", "pizza", ("food", "slice", "italian"), (":pizza:",)),
    ("☕", "coffee", ("drink", "cafe", "espresso", "hot"), (":coffee:",)),
    ("🌙", "moon", ("night", "sleep", "crescent"), (":crescent_moon:",)),
    ("☀️", "sun", ("sunny", "day", "weather", "bright"), (":sunny:",)),
    ("🌈", "rainbow", ("colors", "pride", "weather"), (":rainbow:",)),
    ("🎁", "gift", ("present", "birthday", "surprise"), (":gift:",)),
    ("🎂", "cake", ("birthday", "dessert", "celebrate"), (":birthday:",)),
    ("😢", "crying", ("sad", "tear", "upset"), (":cry:",)),
    ("😴", "sleeping", ("tired", "sleep", "zzz"), (":sleeping:",)),
    ("🤗", "hugging", ("hug", "embrace", "warm"), (":hugs:",)),
    ("🙏", "praying", ("please", "thanks", "hope", "pray"), (":pray:",)),
    ("👏", "clapping", ("applause", "bravo", "clap"), (":clap:",)),
    ("💪", "muscle", ("strong", "flex", "power"), (":muscle:",)),
    ("🎓", "graduation", ("school", "degree", "education"), (":mortar_board:",)),
    ("💰", "money", ("cash", "dollar", "rich"), (":moneybag:",)),
    ("😉", "winking", ("wink", "flirt", "joke"), (":wink:",)),
    ("😅", "sweat smile", ("relief", "nervous", "phew"), (":sweat_smile:",)),
    ("🤣", "rolling on the floor laughing", ("rofl", "laugh", "lol"), (":rofl:",)),
    ("😇", "angel", ("innocent", "halo", "blessed"), (":innocent:",)),
    ("🙂", "slightly smiling", ("smile", "fine"), (":slightly_smiling_face:",)),
    ("🙃", "upside down", ("silly", "sarcasm"), (":upside_down_face:",)),
    ("😐", "neutral", ("meh", "blank", "expressionless"), (":neutral_face:",)),
    ("😬", "grimacing", ("awkward", "eek", "oops"), (":grimacing:",)),
    ("😱", "screaming", ("shock", "fear", "omg"), (":scream:",)),
    ("😡", "angry", ("mad", "rage", "furious"), (":rage:",)),
    ("🤯", "mind blown", ("shocked", "exploding head", "wow"), (":exploding_head:",)),
    ("🥳", "partying face", ("celebrate", "birthday", "party"), (":partying_face:",)),
    ("🥺", "pleading", ("puppy eyes", "please", "beg"), (":pleading_face:",)),
    ("🤝", "handshake", ("deal", "agreement", "meeting"), (":handshake:",)),
    ("👋", "waving hand", ("hello", "hi", "bye", "wave"), (":wave:",)),
    ("👀", "eyes", ("look", "see", "watch"), (":eyes:",)),
    ("🧠", "brain", ("smart", "think", "mind"), (":brain:",)),
    ("💯", "hundred", ("perfect", "score", "100"), (":100:",)),
    ("⚡", "lightning", ("zap", "electric", "power", "fast"), (":zap:",)),
    ("💥", "collision", ("boom", "explosion", "bang"), (":boom:",)),
    ("💀", "skull", ("dead", "death", "dying"), (":skull:",)),
    ("👻", "ghost", ("halloween", "spooky", "boo"), (":ghost:",)),
    ("🤖", "robot", ("bot", "ai", "machine"), (":robot:",)),
    ("🐛", "bug", ("insect", "issue", "error"), (":bug:",)),
    ("🔧", "wrench", ("tool", "fix", "settings"), (":wrench:",)),
    ("🔨", "hammer", ("tool", "build", "fix"), (":hammer:",)),
    ("⚙️", "gear", ("settings", "cog", "config"), (":gear:",)),
    ("🔒", "locked", ("lock", "secure", "private"), (":lock:",)),
    ("🔑", "key", ("password", "unlock", "access"), (":key:",)),
    ("📦", "package", ("box", "parcel", "release"), (":package:",)),
    ("📌", "pushpin", ("pin", "location", "important"), (":pushpin:",)),
    ("📅", "calendar", ("date", "schedule", "event"), (":date:",)),
    ("⏰", "alarm clock", ("time", "wake", "timer"), (":alarm_clock:",)),
    ("📈", "chart increasing", ("growth", "trend", "up", "graph"), (":chart_with_upwards_trend:",)),
    ("📉", "chart decreasing", ("decline", "trend", "down", "graph"), (":chart_with_downwards_trend:",)),
    ("🔍", "magnifying glass", ("search", "find", "zoom"), (":mag:",)),
    ("📧", "email", ("mail", "letter", "message"), (":email:",)),
    ("🏠", "house", ("home", "building"), (":house:",)),
    ("🚗", "car", ("drive", "vehicle", "auto"), (":car:",)),
    ("✈️", "airplane", ("flight", "travel", "plane"), (":airplane:",)),
    ("🐍", "snake", ("python", "serpent"), (":snake:",)),
    ("🐧", "penguin", ("linux", "tux", "bird"), (":penguin:",)),
    ("🐶", "dog", ("puppy", "pet", "woof"), (":dog:",)),
    ("🐱", "cat", ("kitten", "pet", "meow"), (":cat:",)),
    ("🌸", "cherry blossom", ("flower", "spring", "sakura"), (":cherry_blossom:",)),
    ("🍺", "beer", ("drink", "bar", "cheers"), (":beer:",)),
    ("🍔", "hamburger", ("burger", "food", "fast food"), (":hamburger:",)),
    ("🍎", "apple", ("fruit", "red", "healthy"), (":apple:",)),
    ("⚠️", "warning", ("caution", "alert", "danger"), (":warning:",)),
    ("🚫", "prohibited", ("forbidden", "no", "blocked"), (":no_entry_sign:",)),
    ("❓", "question", ("ask", "help", "what"), (":question:",)),
    ("❗", "exclamation", ("important", "alert", "bang"), (":exclamation:",)),
    ("🔴", "red circle", ("dot", "record", "stop"), (":red_circle:",)),
    ("🟢", "green circle", ("dot", "go", "online"), (":green_circle:",)),
)
