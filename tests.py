import math
import os.path
import tempfile
import unittest
import numpy
import numpy.random

from quaternion import Quaternion
from bounding_sphere import BoundingSphere
from escape_time import exterior_distance, interior_distance, \
    derivative_gradient, DistanceEstimate
from sphere_tracing import sphere_trace
from julia_set import JuliaSetParameters, QuaternionJuliaSet
from tracer import Intersection
from textures import NormalTexture
from camera import StaticCamera, camera_rotmat
from scene import Scene
from renderer import Renderer
from imgutils import Image

EPSILON = 1e-9

# Julia set of the example scene
SCENE_C = Quaternion(i=0.2, j=0, k=0, real=-0.8)

def scene_julia_set(**kwargs):
    params = dict(bounding_sphere_radius=3, escape_radius=3.5,
        max_iterations=20, epsilon=0.001)
    params.update(kwargs)
    return QuaternionJuliaSet(SCENE_C, **params)

def normalized(vec):
    vec = numpy.array(vec, dtype=float)
    return vec / numpy.linalg.norm(vec)

class BallEstimator:
    "Exact distance estimators of a ball, centered at the origin"

    def __init__(self, R):
        self.R = R

    def exterior(self, p):
        return numpy.linalg.norm(p) - self.R

    def interior(self, p):
        r = numpy.linalg.norm(p)
        if r > self.R:
            return DistanceEstimate(r - self.R, True)
        return DistanceEstimate(self.R - r, False)

class SlabEstimator:
    "Solid consisting of the slabs 2n <= z < 2n+1"

    def exterior(self, p):
        f = p[2] % 2.0
        if f < 1.0: return 0.0
        return min(f - 1.0, 2.0 - f)

    def interior(self, p):
        f = p[2] % 2.0
        if f < 1.0:
            return DistanceEstimate(min(f, 1.0 - f), False)
        return DistanceEstimate(min(f - 1.0, 2.0 - f), True)

class CrossingAssertions:

    def assertVecsEqual( self, a, b, epsilon=EPSILON ):
        a = numpy.ravel(a)
        b = numpy.ravel(b)
        self.assertTrue( numpy.linalg.norm(a-b) < epsilon, "%s != %s" % (a, b) )

    def assertWellFormedCrossings(self, crossings):
        ts = [c.t for c in crossings]
        self.assertEqual(ts, sorted(ts))
        for idx, c in enumerate(crossings):
            self.assertEqual(c.enter, idx % 2 == 0)
            self.assertEqual(c.front, idx == 0)

class TestQuaternion(unittest.TestCase):

    def assertQuaternionsClose(self, a, b, places=12):
        for x, y in zip(a.components(), b.components()):
            self.assertAlmostEqual(x, y, places=places)

    def test_basis_products(self):
        i = Quaternion(i=1)
        j = Quaternion(j=1)
        k = Quaternion(k=1)
        minus_one = Quaternion(real=-1)

        self.assertEqual(i*j, k)
        self.assertEqual(j*k, i)
        self.assertEqual(k*i, j)
        self.assertEqual(j*i, -k)
        self.assertEqual(i*i, minus_one)
        self.assertEqual(j*j, minus_one)
        self.assertEqual(k*k, minus_one)

    def test_square_matches_product(self):
        q = Quaternion(0.3, -1.2, 0.7, 2.5)
        self.assertQuaternionsClose(q.square(), q*q)

    def test_norm(self):
        q = Quaternion(i=2, j=2, k=1, real=4)
        self.assertEqual(q.norm_squared(), 25.0)
        self.assertEqual(q.norm(), 5.0)

    def test_norm_is_multiplicative(self):
        a = Quaternion(0.1, -0.5, 2.0, 1.5)
        b = Quaternion(-1.0, 0.25, 0.5, -0.75)
        self.assertAlmostEqual((a*b).norm(), a.norm()*b.norm(), places=12)

    def test_scalar_multiplication(self):
        q = Quaternion(1, 2, 3, 4)
        self.assertEqual(2*q, Quaternion(2, 4, 6, 8))
        self.assertEqual(q*0.5, Quaternion(0.5, 1, 1.5, 2))

    def test_addition_and_subtraction(self):
        a = Quaternion(1, 2, 3, 4)
        b = Quaternion(0.5, 0.5, 0.5, 0.5)
        self.assertEqual(a + b, Quaternion(1.5, 2.5, 3.5, 4.5))
        self.assertEqual(a - b - a, -b)

    def test_point_embedding(self):
        q = Quaternion.from_point(numpy.array((1.0, 2.0, 3.0)))
        self.assertEqual(q, Quaternion(i=2, j=3, k=0, real=1))

    def test_immutable(self):
        q = Quaternion(1, 2, 3, 4)
        with self.assertRaises(AttributeError):
            q.real = 0

    def test_finiteness(self):
        self.assertTrue(Quaternion(1, 2, 3, 4).is_finite())
        self.assertFalse(Quaternion(1, float('inf'), 3, 4).is_finite())
        self.assertFalse(Quaternion(float('nan'), 0, 0, 0).is_finite())

class TestEscapeTime(unittest.TestCase):

    ZERO = Quaternion(0, 0, 0, 0)

    def test_exterior_estimate_of_unit_ball(self):
        # For C = 0 the set is the unit ball and the estimate 0.5*r*ln(r)
        d = exterior_distance((2.0, 0.0, 0.0), self.ZERO, 20, 3.5**2)
        self.assertAlmostEqual(d, math.log(2.0), places=12)
        self.assertLess(d, 1.0)

    def test_exterior_estimate_is_positive_outside(self):
        for p in [(0, 2.5, 0), (0, 0, -2.9), (1.5, 1.5, 1.5)]:
            d = exterior_distance(p, self.ZERO, 20, 3.5**2)
            self.assertGreater(d, 0)

    def test_interior_point_does_not_escape(self):
        # attracting fixed point, the orbit neither escapes nor underflows
        c = Quaternion(real=-0.5)
        estimate = interior_distance((0.1, 0.0, 0.0), c, 20, 3.5**2)
        self.assertFalse(estimate.outside)
        self.assertGreater(estimate.distance, 0)

    def test_interior_estimate_detects_outside(self):
        estimate = interior_distance((2.0, 0.0, 0.0), self.ZERO, 20, 3.5**2)
        self.assertTrue(estimate.outside)
        self.assertAlmostEqual(estimate.distance, math.log(2.0), places=12)

    def test_non_finite_magnitudes_end_iteration(self):
        c = Quaternion(real=1e200)
        d = exterior_distance((1e200, 0, 0), c, 50, math.inf)
        self.assertFalse(math.isfinite(d))

        estimate = interior_distance((1e200, 0, 0), c, 50, math.inf)
        self.assertTrue(estimate.outside)

    def test_zero_derivative_gives_nan(self):
        d = exterior_distance((0.0, 0.0, 0.0), self.ZERO, 20, 3.5**2)
        self.assertTrue(math.isnan(d))

    def test_gradient_of_unit_ball_is_radial(self):
        g = derivative_gradient((1.0, 0.0, 0.0), self.ZERO, 20, 1e-7)
        self.assertGreater(g[0], 0)
        self.assertEqual(g[1], 0.0)
        self.assertEqual(g[2], 0.0)

    def test_gradient_keeps_last_finite_value(self):
        # the derivative magnitudes overflow long before 60 iterations
        g = derivative_gradient((50.0, 0.0, 0.0), self.ZERO, 60, 1e-7)
        self.assertTrue(all(math.isfinite(x) for x in g))
        self.assertGreater(g[0], 0)

class TestBoundingSphere(unittest.TestCase):

    def test_entry(self):
        bs = BoundingSphere(3.0)
        self.assertAlmostEqual(bs.entry((0, 0, -5), (0, 0, 1)), 2.0)
        # not normalized
        self.assertAlmostEqual(bs.entry((0, 0, -5), (0, 0, 2)), 1.0)

    def test_origin_inside(self):
        bs = BoundingSphere(3.0)
        self.assertEqual(bs.entry((0, 1, 0), (1, 0, 0)), 0.0)

    def test_misses(self):
        bs = BoundingSphere(3.0)
        self.assertIsNone(bs.entry((0, 0, -5), (0, 0, -1)))
        self.assertIsNone(bs.entry((0, 5, -10), (0, 0, 1)))
        self.assertIsNone(bs.entry((5, 5, 5), (0, 0, 0)))

    def test_contains(self):
        bs = BoundingSphere(2.0)
        self.assertTrue(bs.contains(numpy.array((0, 0, 2.0))))
        self.assertFalse(bs.contains(numpy.array((0, 0, 2.01))))
        self.assertFalse(bs.contains(numpy.array((numpy.nan, 0, 0))))

    def test_bounding_box(self):
        lo, hi = BoundingSphere(1.5).bounding_box()
        self.assertEqual(list(lo), [-1.5, -1.5, -1.5])
        self.assertEqual(list(hi), [1.5, 1.5, 1.5])

    def test_invalid_radius(self):
        with self.assertRaises(ValueError):
            BoundingSphere(0)

class TestSphereTracing(unittest.TestCase, CrossingAssertions):

    def trace_ball(self, origin, direction, **kwargs):
        ball = BallEstimator(1.0)
        settings = dict(epsilon=1e-3)
        settings.update(kwargs)
        params = JuliaSetParameters(**settings)
        return sphere_trace(origin, direction, ball.exterior, ball.interior, params)

    def test_single_enter_and_exit(self):
        crossings = self.trace_ball((0, 0, -5), (0, 0, 1))

        self.assertEqual(len(crossings), 2)
        enter, leave = crossings
        self.assertTrue(enter.enter)
        self.assertTrue(enter.front)
        self.assertFalse(leave.enter)
        self.assertFalse(leave.front)
        self.assertLess(enter.t, leave.t)

        self.assertAlmostEqual(enter.t, 4.0, places=6)
        self.assertAlmostEqual(leave.t, 6.0, places=1)
        self.assertVecsEqual(enter.point, (0, 0, -1), 1e-6)

    def test_missed_bounding_sphere(self):
        self.assertEqual(self.trace_ball((0, 5, -10), (0, 0, 1)), [])
        self.assertEqual(self.trace_ball((5, 5, 5), (1, 1, 1)), [])

    def test_missed_solid(self):
        # passes the ball at distance 2, inside the bounding sphere
        self.assertEqual(self.trace_ball((0, 2, -5), (0, 0, 1)), [])

    def test_degenerate_direction(self):
        self.assertEqual(self.trace_ball((0, 0, -5), (0, 0, 0)), [])

    def test_ray_parameter_independent_of_x_direction(self):
        crossings = self.trace_ball((0, -3, -4), (0, 0.6, 0.8))
        self.assertAlmostEqual(crossings[0].t, 4.0, places=6)

    def test_coarser_epsilon_does_not_add_crossings(self):
        rays = [((0, 0, -5), (0, 0, 1)),
                ((4, 0, 0), (-1, 0, 0)),
                ((0, 2, 2), normalized((0, -1, -1))),
                ((0, 0.5, -5), (0, 0, 1)),
                ((0, 2, -5), (0, 0, 1)),
                ((0, 5, -10), (0, 0, 1))]

        for origin, direction in rays:
            fine = self.trace_ball(origin, direction, epsilon=1e-4)
            coarse = self.trace_ball(origin, direction, epsilon=1e-2)
            self.assertLessEqual(len(coarse), len(fine))

    def test_intersection_cap(self):
        slabs = SlabEstimator()
        params = JuliaSetParameters(bounding_sphere_radius=10, epsilon=1e-3,
            epsilon_relative_to_distance=False, max_intersections=3)
        crossings = sphere_trace((0, 0, -20), (0, 0, 1),
            slabs.exterior, slabs.interior, params)

        self.assertEqual(len(crossings), params.max_intersections + 1)
        self.assertWellFormedCrossings(crossings)

    def test_slabs_without_cap(self):
        slabs = SlabEstimator()
        params = JuliaSetParameters(bounding_sphere_radius=10, epsilon=1e-3,
            epsilon_relative_to_distance=False)
        crossings = sphere_trace((0, 0, -20), (0, 0, 1),
            slabs.exterior, slabs.interior, params)

        self.assertWellFormedCrossings(crossings)
        # ten slabs, possibly touching the one starting at z = 10
        self.assertIn(len(crossings), (20, 21))
        for c in crossings:
            self.assertAlmostEqual(c.point[2], round(c.point[2]), places=2)

    def test_step_cap_terminates(self):
        # never reports a crossing and never leaves the sphere on its own
        params = JuliaSetParameters(max_steps=50, epsilon_relative_to_distance=False)
        crossings = sphere_trace((0, 0, 0), (1, 0, 0),
            lambda p: math.nan, lambda p: DistanceEstimate(0.0, False), params)
        self.assertEqual(crossings, [])

    def test_non_finite_estimate_at_origin_advances(self):
        # the relative epsilon is zero at the ray origin
        calls = []
        def exterior(p):
            calls.append(p)
            return math.nan

        params = JuliaSetParameters(epsilon=1e-2, max_steps=1000)
        crossings = sphere_trace((0, 0, 0), (1, 0, 0),
            exterior, lambda p: DistanceEstimate(math.nan, True), params)

        self.assertEqual(crossings, [])
        self.assertLess(len(calls), 500)
        self.assertGreater(calls[1][0], 0)

class TestJuliaSetParameters(unittest.TestCase):

    def test_defaults(self):
        p = JuliaSetParameters()
        self.assertEqual(p.bounding_sphere_radius, 3.0)
        self.assertEqual(p.bounding_sphere_radius_squared, 9.0)
        self.assertEqual(p.escape_radius_squared, 3.5**2)
        self.assertEqual(p.max_iterations, 20)
        self.assertEqual(p.max_intersections, 128)
        self.assertTrue(p.epsilon_relative_to_distance)
        self.assertEqual(p.c, Quaternion(0, 0, 0, 0))

    def test_replace_recomputes_derived_values(self):
        p = JuliaSetParameters().replace(bounding_sphere_radius=2, escape_radius=4)
        self.assertEqual(p.bounding_sphere_radius_squared, 4.0)
        self.assertEqual(p.escape_radius_squared, 16.0)

    def test_invalid_values(self):
        p = JuliaSetParameters()
        for name in ['bounding_sphere_radius', 'escape_radius',
                     'max_iterations', 'epsilon', 'delta', 'max_intersections']:
            for value in [0, -1]:
                with self.assertRaises(ValueError):
                    p.replace(**{name: value})

        with self.assertRaises(ValueError):
            p.replace(max_iterations=2.5)
        with self.assertRaises(ValueError):
            p.replace(epsilon=float('nan'))
        with self.assertRaises(ValueError):
            p.replace(c=(0, 0, 0, float('inf')))
        with self.assertRaises(ValueError):
            JuliaSetParameters(no_such_parameter=1)

    def test_immutable(self):
        p = JuliaSetParameters()
        with self.assertRaises(AttributeError):
            p.epsilon = 1.0

    def test_c_from_tuple(self):
        p = JuliaSetParameters(c=(0.2, 0, 0, -0.8))
        self.assertEqual(p.c, SCENE_C)

class TestQuaternionJuliaSet(unittest.TestCase, CrossingAssertions):

    def test_rejected_configuration_keeps_previous(self):
        js = scene_julia_set()
        with self.assertRaises(ValueError):
            js.configure(bounding_sphere_radius=0)
        with self.assertRaises(ValueError):
            js.configure(bounding_sphere_radius=-2.0)
        self.assertEqual(js.parameters.bounding_sphere_radius, 3.0)
        self.assertEqual(js.parameters.bounding_sphere_radius_squared, 9.0)

        js.configure(bounding_sphere_radius=2.0)
        self.assertEqual(js.parameters.bounding_sphere_radius_squared, 4.0)
        lo, hi = js.bounding_box()
        self.assertEqual(list(hi), [2.0, 2.0, 2.0])

    def test_example_scene_center_ray(self):
        js = scene_julia_set()
        origin = numpy.array((3.0, 0.1, -3.0))
        direction = normalized((-1.0, 0.0, 1.0))

        # ray parameter where the ray leaves the bounding sphere
        b = numpy.dot(origin, direction)
        c = numpy.dot(origin, origin) - 9.0
        t_exit = -b + math.sqrt(b*b - c)

        crossings = js.intersect(origin, direction)
        self.assertGreater(len(crossings), 0)
        first = crossings[0]
        self.assertTrue(first.enter)
        self.assertTrue(first.front)
        self.assertLess(first.t, t_exit)
        self.assertWellFormedCrossings(crossings)

    def test_rays_pointing_away_miss(self):
        js = scene_julia_set()
        self.assertEqual(js.intersect((5, 5, 5), normalized((1, 1, 1))), [])
        self.assertEqual(js.intersect((0, 0, -5), (0, 0, -1)), [])

    def test_crossing_sequences_are_well_formed(self):
        js = scene_julia_set()
        numpy.random.seed(1)
        for _ in range(6):
            origin = normalized(numpy.random.normal(size=3)) * 4.0
            target = numpy.random.uniform(-0.5, 0.5, size=3)
            crossings = js.intersect(origin, normalized(target - origin))
            self.assertWellFormedCrossings(crossings)
            self.assertLessEqual(len(crossings), js.parameters.max_intersections + 1)

    def test_coarser_epsilon_finds_fewer_crossings_in_total(self):
        # single grazing rays may gain crossings, the total may not grow
        fine_js = scene_julia_set(epsilon=1e-4, epsilon_relative_to_distance=False)
        coarse_js = scene_julia_set(epsilon=1e-2, epsilon_relative_to_distance=False)

        numpy.random.seed(3)
        fine, coarse = 0, 0
        for _ in range(20):
            origin = normalized(numpy.random.normal(size=3)) * 4.0
            target = numpy.random.uniform(-0.5, 0.5, size=3)
            direction = normalized(target - origin)
            fine += len(fine_js.intersect(origin, direction))
            coarse += len(coarse_js.intersect(origin, direction))

        self.assertGreater(fine, 0)
        self.assertLessEqual(coarse, fine)

    def test_unit_ball_surface_and_normal(self):
        # C = 0: the set is the unit ball
        js = QuaternionJuliaSet((0, 0, 0, 0), epsilon=1e-4)
        crossings = js.intersect((0, 0, -5), (0, 0, 1))

        first = crossings[0]
        self.assertTrue(first.enter and first.front)
        self.assertAlmostEqual(first.t, 4.0, places=2)
        self.assertIs(first.solid, js)

        normal = js.complete_intersection(first)
        self.assertIs(first.normal, normal)
        self.assertAlmostEqual(numpy.linalg.norm(normal), 1.0, places=12)
        self.assertVecsEqual(normal, (0, 0, -1), 1e-3)

    def test_complete_intersection_is_idempotent(self):
        js = scene_julia_set()
        crossings = js.intersect((3.0, 0.1, -3.0), normalized((-1.0, 0.0, 1.0)))
        first = crossings[0]

        n1 = numpy.array(js.complete_intersection(first))
        n2 = numpy.array(js.complete_intersection(first))
        numpy.testing.assert_array_equal(n1, n2)
        self.assertTrue(numpy.all(numpy.isfinite(n1)))

    def test_degenerate_normal_falls_back_to_ray_direction(self):
        js = QuaternionJuliaSet((0, 0, 0, 0))
        inter = Intersection(js, 1.0, numpy.zeros(3), numpy.array((0, 0, 2.0)),
            True, True)
        with self.assertLogs('julia_set', level='DEBUG'):
            normal = js.complete_intersection(inter)
        self.assertVecsEqual(normal, (0, 0, -1))

    def test_foreign_intersection_rejected(self):
        js1 = QuaternionJuliaSet((0, 0, 0, 0))
        js2 = QuaternionJuliaSet((0, 0, 0, 0))
        inter = js1.intersect((0, 0, -5), (0, 0, 1))[0]
        with self.assertRaises(ValueError):
            js2.complete_intersection(inter)

class TestNormalTexture(unittest.TestCase):

    def test_color_and_key(self):
        inter = Intersection(None, 1.0, numpy.zeros(3), numpy.array((0, 0, 1.0)),
            True, True)
        inter.normal = numpy.array((1.0, 0.0, 0.0))

        color, key = NormalTexture().apply(inter)
        self.assertEqual(list(color), [0.0, 0.5, 0.5])

        s = NormalTexture.KEY_SCALE
        self.assertEqual(key, ((2*s) << 42) | (s << 21) | s)

    def test_completes_missing_normal(self):
        js = QuaternionJuliaSet((0, 0, 0, 0), epsilon=1e-4)
        inter = js.intersect((0, 0, -5), (0, 0, 1))[0]
        self.assertFalse(inter.completed)
        color, _ = NormalTexture().apply(inter)
        self.assertIsNotNone(inter.normal)
        self.assertTrue(inter.completed)
        self.assertAlmostEqual(color[2], 1.0, places=3)

class TestCamera(unittest.TestCase, CrossingAssertions):

    def test_rotmat_orthogonal(self):
        rot = camera_rotmat((-1, 0, 1), (0, 1, 0))
        self.assertVecsEqual(numpy.dot(rot.T, rot), numpy.eye(3))
        self.assertVecsEqual(rot[:, 2], normalized((-1, 0, 1)))

    def test_center_ray(self):
        cam = StaticCamera((3, 0.1, -3), (-1.0, 0.0, 1.0), fov=50.0)
        origin, direction = cam.ray(1, 1, 3, 3)
        self.assertVecsEqual(origin, (3, 0.1, -3))
        self.assertVecsEqual(direction, normalized((-1, 0, 1)))

    def test_rays_are_unit_and_upright(self):
        cam = StaticCamera((0, 0, -5), (0, 0, 1), fov=60.0)
        rays = cam.rays(4, 3)
        self.assertEqual(rays.shape, (3, 4, 3))
        self.assertVecsEqual(numpy.linalg.norm(rays, axis=2), numpy.ones((3, 4)))
        # first row looks up, first and last columns are mirrored
        self.assertGreater(rays[0, 0, 1], 0)
        self.assertAlmostEqual(rays[0, 0, 0], -rays[0, -1, 0], places=12)

    def test_invalid_camera(self):
        with self.assertRaises(ValueError):
            StaticCamera((0, 0, 0), (0, 0, 0))
        with self.assertRaises(ValueError):
            StaticCamera((0, 0, 0), (0, 1, 0), up=(0, 1, 0))

class TestRendering(unittest.TestCase):

    def make_scene(self):
        scene = Scene()
        scene.image_size = (3, 3)
        scene.camera = StaticCamera((0, 0, -5), (0, 0, 1), fov=50.0)
        scene.add_object(QuaternionJuliaSet((0, 0, 0, 0), epsilon=1e-4), name='ball')
        return scene

    def test_get_object(self):
        scene = self.make_scene()
        self.assertIsInstance(scene.get_object('ball').texture, NormalTexture)
        with self.assertRaises(KeyError):
            scene.get_object('missing')

    def test_render_ball(self):
        scene = self.make_scene()
        rows = []
        img = Renderer(scene).render(lambda done, total: rows.append(done))

        self.assertEqual(img.shape, (3, 3, 3))
        self.assertEqual(rows, [1, 2, 3])
        for c, expected in zip(img[1, 1, :], (0.5, 0.5, 1.0)):
            self.assertAlmostEqual(c, expected, places=2)
        self.assertEqual(list(img[0, 0, :]), [0.0, 0.0, 0.0])

    def test_crossings_behind_camera_are_skipped(self):
        class FixedTracer:
            def __init__(self, crossings):
                self.crossings = crossings
            def intersect(self, origin, direction):
                return self.crossings

        def crossing(t, enter):
            return Intersection(None, t, numpy.zeros(3), numpy.array((0, 0, 1.0)),
                enter, False)

        scene = Scene()
        scene.add_object(FixedTracer([crossing(-2.0, True), crossing(-1.0, False),
            crossing(3.0, True)]), name='far')
        scene.add_object(FixedTracer([crossing(-0.5, True)]), name='behind')
        scene.add_object(FixedTracer([crossing(5.0, False)]), name='exit')

        obj, inter = Renderer(scene).first_hit(numpy.zeros(3), (0, 0, 1))
        self.assertEqual(obj.name, 'far')
        self.assertEqual(inter.t, 3.0)

    def test_save_images(self):
        data = numpy.zeros((2, 3, 3))
        data[0, 0, :] = (1.0, 0.5, 2.0)
        image = Image(data=data)

        encoded = image.to_24bit()
        self.assertEqual(list(encoded[0, 0, :]), [255, 127, 255])

        with tempfile.TemporaryDirectory() as tmp:
            png = os.path.join(tmp, 'out.png')
            raw = os.path.join(tmp, 'out.raw.npy')
            image.save_png(png)
            image.save_raw(raw)
            self.assertTrue(os.path.exists(png))
            numpy.testing.assert_array_equal(Image(raw).data, data)

    def test_example_scene_file(self):
        from juliaray import import_scene
        path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
            'scenes', 'julia-set.py')
        scene = import_scene(path)
        julia = scene.get_object('julia').tracer
        self.assertEqual(julia.parameters.epsilon, 0.001)
        self.assertEqual(julia.c, SCENE_C)

if __name__ == '__main__':
    unittest.main()
