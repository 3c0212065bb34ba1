from enum import Enum

MAX_FINGERS = 4  # A hand holding more than this is reset to 0 (dead)
NUM_COUNTS = MAX_FINGERS + 1  # Hand counts 0..4
DEAD = (0, 0)  # Hand-pair of a player who has lost
INITIAL_STATE = ((1, 1), (1, 1))


class Perspective(Enum):
    '''
    Which element of a state tuple belongs to the caller.
    HOME: the caller's hand-pair is the first element (the stored convention).
    AWAY: the caller's hand-pair is the second element; states are swapped
    before the caller's table is consulted and swapped back afterwards.
    '''
    HOME = 0
    AWAY = 1

    def orient(self, state):
        return state if self is Perspective.HOME else swap(state)


class ChopsticksGame:
    '''
    Chopsticks rules for the tabular learner.
    Each player has two hands with 0-4 fingers, each hand starting at 1 finger.
    A state is a pair of hand-pairs ((home0, home1), (away0, away1)) seen from the
    player about to move: home is the mover, away is the opponent.
    Moves never change who is home, only one side's hand-pair changes per ply.
    Transfer: a live home hand adds its count onto a live away hand.
        Dead hands can neither tap nor be tapped.
    Reset: a hand exceeding 4 fingers becomes 0 (dead). This is ceiling-to-zero,
        so 6, 7 and 8 also become 0 rather than wrapping around modulo 5.
    Redistribution: the mover reallocates home0 + home1 between their hands,
        (i, s - i) for i in max(0, s - 4)..s // 2, skipping splits that reproduce
        either original hand value. A split may leave a hand at 0.
    A player with both hands dead has lost. There are no draws.
    '''

    @staticmethod
    def get_successors(state):
        # Returns legal successor states, transfers first, then redistributions
        home, away = state
        successors = []

        # Transfers, ordered home0->away0, home1->away0, home0->away1, home1->away1
        if away[0] > 0:
            if home[0] > 0:
                successors.append((home, (away[0] + home[0], away[1])))
            if home[1] > 0:
                successors.append((home, (away[0] + home[1], away[1])))
        if away[1] > 0:
            if home[0] > 0:
                successors.append((home, (away[0], away[1] + home[0])))
            if home[1] > 0:
                successors.append((home, (away[0], away[1] + home[1])))

        successors = [(new_home, (reset(new_away[0]), reset(new_away[1])))
                      for new_home, new_away in successors]

        total = home[0] + home[1]
        for i in range(max(0, total - MAX_FINGERS), total // 2 + 1):
            if i != home[0] and i != home[1]:
                successors.append(((i, total - i), away))

        # Collapse states that only differ in hand order, they share a table cell
        unique = {}
        for successor in successors:
            unique.setdefault(canonical(successor), successor)
        return list(unique.values())

    @staticmethod
    def is_terminal(state):
        home, away = state
        return home == DEAD or away == DEAD

    @staticmethod
    def winner(state):
        '''
        Returns None if the game continues,
        Perspective.HOME if the away side has lost,
        Perspective.AWAY if the home side has lost.
        '''
        home, away = state
        if home == DEAD and away == DEAD:
            raise ValueError("Invalid state: both players have lost.")
        if away == DEAD:
            return Perspective.HOME
        if home == DEAD:
            return Perspective.AWAY
        return None

    @staticmethod
    def is_valid(state):
        return all(0 <= count <= MAX_FINGERS for pair in state for count in pair)


def reset(count):
    return 0 if count > MAX_FINGERS else count


def swap(state):
    home, away = state
    return away, home


def canonical(state):
    # Orders each hand-pair so symmetric states compare equal
    home, away = state
    return tuple(sorted(home, reverse=True)), tuple(sorted(away, reverse=True))


# Single-state utility functions
def get_successors(state):
    return ChopsticksGame.get_successors(state)


def is_terminal(state):
    return ChopsticksGame.is_terminal(state)
