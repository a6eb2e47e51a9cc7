import itertools
import unittest

from tabletop.entities.board import Board
from tabletop.entities.robot import Robot
from tabletop.utils.consts import MAX_X, MAX_Y
from tabletop.utils.enums import Direction
from tabletop.utils.types import Position


class TestDirection(unittest.TestCase):
    def test_angles(self):
        self.assertEqual([int(d) for d in Direction], [0, 90, 180, 270])

    def test_wraparound(self):
        self.assertEqual(Direction.NORTH.left(), Direction.WEST)
        self.assertEqual(Direction.WEST.right(), Direction.NORTH)

    def test_rotation_has_order_four(self):
        for d in Direction:
            self.assertEqual(d.left().left().left().left(), d)
            self.assertEqual(d.right().right().right().right(), d)
            self.assertEqual(d.left().right(), d)
            self.assertEqual(d.right().left(), d)


class TestBoard(unittest.TestCase):
    def test_default_is_five_by_five(self):
        board = Board()
        self.assertEqual((board.size_x, board.size_y), (5, 5))
        self.assertTrue(board.is_within_bounds(0, 0))
        self.assertTrue(board.is_within_bounds(MAX_X, MAX_Y))
        self.assertFalse(board.is_within_bounds(MAX_X + 1, 0))
        self.assertFalse(board.is_within_bounds(0, -1))

    def test_negative_bounds_rejected(self):
        with self.assertRaises(ValueError):
            Board(-1, 4)


class TestRobot(unittest.TestCase):
    def setUp(self):
        self.robot = Robot()

    def test_starts_unplaced(self):
        self.assertFalse(self.robot.is_placed())
        self.assertIsNone(self.robot.report())

    def test_place_then_report_for_every_cell(self):
        for x, y, d in itertools.product(range(MAX_X + 1), range(MAX_Y + 1), Direction):
            self.assertTrue(self.robot.place(x, y, d))
            self.assertEqual(self.robot.report(), Position(x, y, d))

    def test_out_of_range_place_keeps_unplaced(self):
        for x, y in [(MAX_X + 1, 0), (0, MAX_Y + 1), (-1, 0), (0, -2)]:
            self.assertFalse(self.robot.place(x, y, Direction.EAST))
            self.assertIsNone(self.robot.report())

    def test_out_of_range_place_keeps_previous_position(self):
        self.robot.place(2, 2, Direction.SOUTH)
        self.assertFalse(self.robot.place(MAX_X + 1, 0, Direction.EAST))
        self.assertEqual(self.robot.report(), Position(2, 2, Direction.SOUTH))

    def test_move_from_centre_changes_one_coordinate(self):
        expected = {
            Direction.NORTH: (2, 3),
            Direction.EAST: (3, 2),
            Direction.SOUTH: (2, 1),
            Direction.WEST: (1, 2),
        }
        for d, (x, y) in expected.items():
            self.robot.place(2, 2, d)
            self.assertTrue(self.robot.move())
            self.assertEqual(self.robot.report(), Position(x, y, d))

    def test_move_off_every_edge_is_dropped(self):
        for i in range(MAX_X + 1):
            for x, y, d in [(i, 0, Direction.SOUTH), (i, MAX_Y, Direction.NORTH)]:
                self.robot.place(x, y, d)
                self.assertFalse(self.robot.move())
                self.assertEqual(self.robot.report(), Position(x, y, d))
        for j in range(MAX_Y + 1):
            for x, y, d in [(0, j, Direction.WEST), (MAX_X, j, Direction.EAST)]:
                self.robot.place(x, y, d)
                self.assertFalse(self.robot.move())
                self.assertEqual(self.robot.report(), Position(x, y, d))

    def test_turns_keep_position(self):
        self.robot.place(1, 3, Direction.NORTH)
        self.robot.turn_left()
        self.assertEqual(self.robot.report(), Position(1, 3, Direction.WEST))
        self.robot.turn_right()
        self.robot.turn_right()
        self.assertEqual(self.robot.report(), Position(1, 3, Direction.EAST))

    def test_unplaced_robot_ignores_move_and_turns(self):
        self.assertFalse(self.robot.move())
        self.assertFalse(self.robot.turn_left())
        self.assertFalse(self.robot.turn_right())
        self.assertIsNone(self.robot.report())

    def test_reset(self):
        self.robot.place(0, 0, Direction.NORTH)
        self.robot.reset()
        self.assertFalse(self.robot.is_placed())

    def test_custom_board(self):
        robot = Robot(Board(max_x=1, max_y=0))
        self.assertTrue(robot.place(1, 0, Direction.WEST))
        self.assertTrue(robot.move())
        self.assertFalse(robot.move())
        self.assertEqual(robot.report(), Position(0, 0, Direction.WEST))
        self.assertFalse(robot.place(2, 0, Direction.WEST))


if __name__ == "__main__":
    unittest.main()
