"""Human agent - reads actions from terminal."""

from untable.engine import Action, Color, DrawCard, PlayCard, PlayerView

COLOR_KEYS = {
    "r": Color.RED,
    "b": Color.BLUE,
    "g": Color.GREEN,
    "y": Color.YELLOW,
}


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_number: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        hand = player_view.my_hand
        top = player_view.top_discard
        print("\n--- Your turn ---")
        top_text = str(top) if top else "None"
        if top is not None and top.is_wild and player_view.chosen_wild_color:
            top_text += f" ({player_view.chosen_wild_color.label})"
        print("Top discard:", top_text)
        print("\nYour hand:")
        for i, card in enumerate(hand):
            marker = " <- drawn" if card == player_view.just_drawn_card else ""
            print(f"  {i}: {card}{marker}")
        drawn = player_view.just_drawn_card is not None
        print(f"  d: {'PASS' if drawn else 'DRAW'}")

        while True:
            try:
                raw = input("Enter number or d: ").strip().lower()
            except EOFError:
                return DrawCard()
            if raw == "d":
                return DrawCard()
            try:
                idx = int(raw)
            except ValueError:
                idx = -1
            if 0 <= idx < len(hand):
                # Illegal picks go to the engine, which rejects them
                return PlayCard(card=hand[idx])
            print("Invalid. Try again.")

    def choose_color(self, player_view: PlayerView) -> Color:
        """Prompt for a wild color. No selection (blank line or EOF) means Red."""
        print("Choose a color for the Wild card: [r]ed, [b]lue, [g]reen, [y]ellow")
        while True:
            try:
                raw = input("Color: ").strip().lower()
            except EOFError:
                return Color.RED
            if not raw:
                return Color.RED
            if raw in COLOR_KEYS:
                return COLOR_KEYS[raw]
            if raw in {c.value for c in Color}:
                return Color(raw)
            print("Invalid. Try again.")
