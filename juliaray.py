"""
Program entry point.

To use, an instance of the Scene class should be defined in a scene file (e.g.,
scenes/julia-set.py), which is provided to this program as a command
line argument.

The scene is rendered by the Renderer class, which traces one ray per pixel
through the objects of the scene. The resulting image is written to
PNG_OUTPUT_FILE and the raw floating point data to RAW_OUTPUT_FILE.
"""

import argparse
import importlib.util
import logging
import os.path
import time

PNG_OUTPUT_FILE = 'out.png'
RAW_OUTPUT_FILE = 'out.raw.npy'

def import_scene(path):
    scene_name = 'scene_' + os.path.basename(path).split('.')[0].replace('-', '_')
    spec = importlib.util.spec_from_file_location(scene_name, path)
    if spec is None:
        raise ImportError("cannot load scene file %s" % path)
    scene_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(scene_module)
    return scene_module.scene

def parse_args(argv=None):
    arg_parser = argparse.ArgumentParser(description=__doc__.split('\n\n')[1])
    arg_parser.add_argument('-o', '--output', default=PNG_OUTPUT_FILE)
    arg_parser.add_argument('-r', '--raw_output', default=RAW_OUTPUT_FILE)
    arg_parser.add_argument('-s', '--size', type=int, nargs=2,
        metavar=('WIDTH', 'HEIGHT'), help='override scene image size')
    arg_parser.add_argument('-v', '--verbose', action='store_true')
    arg_parser.add_argument('-l', '--log_file')
    arg_parser.add_argument('scene')
    return arg_parser.parse_args(argv)

def main(argv=None):
    from logging_config import setup_logging
    from renderer import Renderer
    from imgutils import Image

    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    startup_time = time.time()

    scene = import_scene(args.scene)
    if args.size is not None:
        scene.image_size = tuple(args.size)

    renderer = Renderer(scene)

    def progress(rows_done, rows_total):
        elapsed = time.time() - startup_time
        rows_per_second = rows_done / max(elapsed, 1e-9)
        eta = (rows_total - rows_done) / rows_per_second
        print('%d/%d rows,' % (rows_done, rows_total),
              'elapsed: %.2f s,' % elapsed,
              'eta: %.1f min' % (eta/60.0))

    imgdata = renderer.render(progress)

    image = Image(data=imgdata)
    image.save_raw(args.raw_output)
    image.save_png(args.output)

    rays_per_second = int(renderer.rays_per_sample() / max(time.time() - startup_time, 1e-9))
    print('%d rays/s, wrote %s' % (rays_per_second, args.output))

if __name__ == '__main__':
    main()
