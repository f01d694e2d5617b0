from __future__ import annotations
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

State = Tuple[int, ...]  # 11 hallway cells, then rooms 0..3 front-to-back

HALLWAY = 11
ROOMS = 4
DOORS: Tuple[int, ...] = (2, 4, 6, 8)
WEIGHTS: Tuple[int, ...] = (0, 1, 10, 100, 1000)  # indexed by Token value

# Official rows inserted between front and back when unfolding to depth 4
UNFOLD_ROWS: Tuple[str, ...] = ("DD", "CB", "BA", "AC")


class MalformedConfiguration(ValueError):
    """Start layout that cannot be searched (bad length, contents or counts)."""


class Token(IntEnum):
    EMPTY = 0
    A = 1
    B = 2
    C = 3
    D = 4

    @property
    def weight(self) -> int:
        if self is Token.EMPTY:
            raise ValueError("Empty cell does not have a step weight")
        return WEIGHTS[self]

    @property
    def room(self) -> int:
        if self is Token.EMPTY:
            raise ValueError("Empty cell does not have a room")
        return self - 1

    @property
    def char(self) -> str:
        return "." if self is Token.EMPTY else self.name

    @classmethod
    def from_char(cls, ch: str) -> "Token":
        if ch == ".":
            return cls.EMPTY
        try:
            return cls[ch]
        except KeyError:
            raise MalformedConfiguration(f"Unrecognized cell character: {ch!r}") from None


EMPTY = Token.EMPTY


class Burrow:
    """
    Burrow layout for rooms of a given depth.

    Cell addressing: 0..10 is the hallway, room r (designated for token
    kind r+1) occupies cells 11 + r*depth .. 11 + (r+1)*depth - 1, front first.
    """
    def __init__(self, depth: int):
        assert depth >= 1
        self.D = depth
        self.size = HALLWAY + ROOMS * depth
        self.room_cells: Tuple[int, ...] = tuple(range(HALLWAY, self.size))
        self.resting: Tuple[int, ...] = tuple(i for i in range(HALLWAY) if i not in DOORS)
        goal = [EMPTY] * self.size
        for r in range(ROOMS):
            for d in range(depth):
                goal[self.cell(r, d)] = Token(r + 1)
        self.GOAL: State = tuple(goal)
        self._door_room: Dict[int, int] = {DOORS[r]: r for r in range(ROOMS)}

    # ---------- Addressing ----------
    def room_of(self, i: int) -> int:
        return (i - HALLWAY) // self.D

    def depth_of(self, i: int) -> int:
        return (i - HALLWAY) % self.D

    def cell(self, r: int, d: int) -> int:
        return HALLWAY + r * self.D + d

    @staticmethod
    def door(r: int) -> int:
        return 2 + 2 * r

    def room(self, s: State, r: int) -> State:
        start = self.cell(r, 0)
        return s[start:start + self.D]

    def in_own_room(self, i: int, t: int) -> bool:
        return i >= HALLWAY and self.room_of(i) == Token(t).room

    def distance(self, i: int, j: int) -> int:
        """Steps between two cells, ignoring any tokens in the way."""
        if i < HALLWAY and j < HALLWAY:
            return abs(i - j)
        if i < HALLWAY or j < HALLWAY:
            room, hall = (i, j) if i >= HALLWAY else (j, i)
            return abs(hall - self.door(self.room_of(room))) + self.depth_of(room) + 1
        r1, d1 = self.room_of(i), self.depth_of(i)
        r2, d2 = self.room_of(j), self.depth_of(j)
        if r1 == r2:
            return abs(d1 - d2)
        return abs(self.door(r1) - self.door(r2)) + d1 + d2 + 2

    # ---------- Construction & validation ----------
    def from_rooms(self, rooms: Sequence[str], hallway: Optional[str] = None) -> State:
        """Build a state from per-room strings (front to back) and an optional hallway string."""
        if len(rooms) != ROOMS:
            raise MalformedConfiguration(f"Expected {ROOMS} rooms, got {len(rooms)}")
        hallway = hallway if hallway is not None else "." * HALLWAY
        if len(hallway) != HALLWAY:
            raise MalformedConfiguration(f"Hallway must have {HALLWAY} cells, got {len(hallway)}")
        cells: List[Token] = [Token.from_char(ch) for ch in hallway]
        for r, row in enumerate(rooms):
            if len(row) != self.D:
                raise MalformedConfiguration(f"Room {r} must have {self.D} cells, got {len(row)}")
            cells.extend(Token.from_char(ch) for ch in row)
        return tuple(cells)

    def counts(self, s: Iterable[int]) -> Dict[Token, int]:
        out = {t: 0 for t in Token if t is not EMPTY}
        for t in s:
            if t:
                out[Token(t)] += 1
        return out

    def validate(self, s: Sequence[int]) -> State:
        """Reject states of the wrong size, with unknown cell values, tokens on doors, or with wrong per-kind counts."""
        if len(s) != self.size:
            raise MalformedConfiguration(f"Expected {self.size} cells for depth {self.D}, got {len(s)}")
        try:
            cells = tuple(Token(t) for t in s)
        except ValueError as e:
            raise MalformedConfiguration(str(e)) from e
        blocked = [i for i in DOORS if cells[i] != EMPTY]
        if blocked:
            raise MalformedConfiguration(f"Doors can never hold a token, occupied: {blocked}")
        have, want = self.counts(cells), self.counts(self.GOAL)
        if have != want:
            bad = ", ".join(f"{t.name}={have[t]}" for t in have if have[t] != want[t])
            raise MalformedConfiguration(f"Each kind needs exactly {self.D} tokens ({bad})")
        return cells

    def is_goal(self, s: State) -> bool:
        return s == self.GOAL

    # ---------- Core dynamics ----------
    def reachable(self, s: State, i: int) -> List[Tuple[int, int]]:
        """
        (cell, steps) pairs reachable from cell i through empty cells only.
        Legality rules are applied separately in moves().
        """
        out: List[Tuple[int, int]] = []
        origin_room = -1
        hall, hall_cost = i, 0
        if i >= HALLWAY:
            origin_room = self.room_of(i)
            front = self.cell(origin_room, 0)
            for steps, j in enumerate(range(i + 1, front + self.D), start=1):
                if s[j] != EMPTY:
                    break
                out.append((j, steps))
            for steps, j in enumerate(range(i - 1, front - 1, -1), start=1):
                if s[j] != EMPTY:
                    return out
                out.append((j, steps))
            hall, hall_cost = self.door(origin_room), self.depth_of(i) + 1
            if s[hall] != EMPTY:
                return out
            out.append((hall, hall_cost))

        spots: List[Tuple[int, int]] = []
        for j in range(hall - 1, -1, -1):
            if s[j] != EMPTY:
                break
            spots.append((j, hall_cost + hall - j))
        for j in range(hall + 1, HALLWAY):
            if s[j] != EMPTY:
                break
            spots.append((j, hall_cost + j - hall))

        for h, c in [(hall, hall_cost)] + spots:
            r = self._door_room.get(h)
            if r is None or r == origin_room:
                continue
            for d in range(self.D):
                j = self.cell(r, d)
                if s[j] != EMPTY:
                    break
                out.append((j, c + d + 1))
        out.extend(spots)
        return out

    def _pure(self, s: State, t: int) -> bool:
        return all(x == EMPTY or x == t for x in self.room(s, Token(t).room))

    def _move(self, s: State, i: int, j: int) -> State:
        lst = list(s)
        lst[j], lst[i] = lst[i], EMPTY
        return tuple(lst)

    def moves(self, s: State, i: int) -> List[Tuple[State, int]]:
        """Legal (next_state, cost) pairs for the token at cell i."""
        t = s[i]
        tok = Token(t)
        w, home_room = tok.weight, tok.room
        if i >= HALLWAY and self.in_own_room(i, t):
            behind = s[i + 1:self.cell(home_room, self.D)]
            if all(x == EMPTY or x == t for x in behind):
                # Settled: at most sink to the deepest empty cell right behind it
                steps = 0
                for x in behind:
                    if x != EMPTY:
                        break
                    steps += 1
                if steps == 0:
                    return []
                return [(self._move(s, i, i + steps), steps * w)]

        reach = self.reachable(s, i)
        out: List[Tuple[State, int]] = []
        if self._pure(s, t):
            home = [(j, c) for j, c in reach if j >= HALLWAY and self.room_of(j) == home_room]
            if home:
                j, c = max(home)
                out.append((self._move(s, i, j), c * w))
        if i >= HALLWAY:
            for j, c in reach:
                if j in self.resting:
                    out.append((self._move(s, i, j), c * w))
        return out

    def neighbors(self, s: State) -> List[Tuple[State, int]]:
        """Return list of (next_state, cost) over every token."""
        out: List[Tuple[State, int]] = []
        for i, t in enumerate(s):
            if t != EMPTY:
                out.extend(self.moves(s, i))
        return out

    # ---------- Display ----------
    def render(self, s: State) -> str:
        ch = [Token(t).char for t in s]
        lines = ["#" * 13, "#" + "".join(ch[:HALLWAY]) + "#"]
        for d in range(self.D):
            row = "#".join(ch[self.cell(r, d)] for r in range(ROOMS))
            lines.append(("###" if d == 0 else "  #") + row + ("###" if d == 0 else "#  "))
        lines.append("  #########  ")
        return "\n".join(lines)


def unfold(s: State) -> State:
    """Depth-2 state -> depth-4 state with the official extra rows inserted."""
    small, big = Burrow(2), Burrow(4)
    if len(s) != small.size:
        raise MalformedConfiguration(f"Only depth-2 states can be unfolded, got {len(s)} cells")
    rooms = []
    for r in range(ROOMS):
        front, back = small.room(s, r)
        rooms.append(Token(front).char + UNFOLD_ROWS[r] + Token(back).char)
    hallway = "".join(Token(t).char for t in s[:HALLWAY])
    return big.from_rooms(rooms, hallway)
