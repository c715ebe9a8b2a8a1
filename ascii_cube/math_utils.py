#
# PROJECT: ascii-cube
# MODULE: ascii_cube/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

class Vec3:
    """Immutable 3-component vector (a point in cube-local space)."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


class Mat3:
    """3x3 rotation matrix, stored as [row][col]."""
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = [list(row) for row in data]
        else:
            self.m = [[0.0] * 3 for _ in range(3)]

    @classmethod
    def identity(cls) -> 'Mat3':
        res = cls()
        for i in range(3):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1][1] = c
        mat.m[1][2] = -s
        mat.m[2][1] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][2] = s
        mat.m[2][0] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = -s
        mat.m[1][0] = s
        mat.m[1][1] = c
        return mat

    @classmethod
    def euler(cls, alpha: float, beta: float, gamma: float) -> 'Mat3':
        """
        Cube rotation for Euler angles in degrees.

        alpha turns around Z, beta around Y, gamma around X; the composed
        matrix is Rz(alpha) @ Ry(beta) @ Rx(gamma), so gamma is applied first.
        """
        return (cls.rotation_z(math.radians(alpha))
                @ cls.rotation_y(math.radians(beta))
                @ cls.rotation_x(math.radians(gamma)))

    @classmethod
    def euler_inverse(cls, alpha: float, beta: float, gamma: float) -> 'Mat3':
        """Undo euler(alpha, beta, gamma): Rx(-gamma) @ Ry(-beta) @ Rz(-alpha)."""
        return (cls.rotation_x(math.radians(-gamma))
                @ cls.rotation_y(math.radians(-beta))
                @ cls.rotation_z(math.radians(-alpha)))

    def transpose(self) -> 'Mat3':
        return Mat3([[self.m[c][r] for c in range(3)] for r in range(3)])

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            res = Mat3()
            for r in range(3):
                for c in range(3):
                    val = 0.0
                    for k in range(3):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def mul_vec3(self, v) -> Vec3:
        x = self.m[0][0]*v[0] + self.m[0][1]*v[1] + self.m[0][2]*v[2]
        y = self.m[1][0]*v[0] + self.m[1][1]*v[1] + self.m[1][2]*v[2]
        z = self.m[2][0]*v[0] + self.m[2][1]*v[1] + self.m[2][2]*v[2]
        return Vec3(x, y, z)


def rotate_point(point, alpha: float, beta: float, gamma: float) -> Vec3:
    """Rotate a cube-local point by Euler angles given in degrees."""
    return Mat3.euler(alpha, beta, gamma).mul_vec3(point)


def inverse_rotate_point(point, alpha: float, beta: float, gamma: float) -> Vec3:
    """Apply the reverse-composed rotation; inverse of rotate_point."""
    return Mat3.euler_inverse(alpha, beta, gamma).mul_vec3(point)
