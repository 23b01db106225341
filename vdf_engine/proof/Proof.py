class Proof:
    """A Wesolowski proof in transport form.

    y, pi, l and r are standard base64 strings over minimal big-endian bytes;
    iterations is the plain integer t. Instances are immutable.
    """

    __slots__ = ("_y", "_pi", "_l", "_r", "_iterations")

    def __init__(self, y: str, pi: str, l: str, r: str, iterations: int) -> None:
        """Initialize a proof.

        Args:
            y (str): Base64 of the delay output x^(2^t) mod N
            pi (str): Base64 of the witness x^q mod N
            l (str): Base64 of the challenge prime
            r (str): Base64 of 2^t mod l
            iterations (int): The iteration count t
        """
        object.__setattr__(self, "_y", y)
        object.__setattr__(self, "_pi", pi)
        object.__setattr__(self, "_l", l)
        object.__setattr__(self, "_r", r)
        object.__setattr__(self, "_iterations", iterations)

    def __setattr__(self, name, value):
        raise AttributeError("Proof is immutable")

    def __delattr__(self, name):
        raise AttributeError("Proof is immutable")

    def __eq__(self, other):
        if not isinstance(other, Proof):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self):
        return hash(self._as_tuple())

    def __repr__(self):
        return f"<Proof(iterations={self._iterations}, l={self._l}, r={self._r})>"

    def get_y(self) -> str:
        return self._y

    def get_pi(self) -> str:
        return self._pi

    def get_l(self) -> str:
        return self._l

    def get_r(self) -> str:
        return self._r

    def get_iterations(self) -> int:
        return self._iterations

    def _as_tuple(self) -> tuple:
        return (self._y, self._pi, self._l, self._r, self._iterations)
