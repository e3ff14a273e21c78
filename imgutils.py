
# ------- Image input/output utils

import numpy as np

class ColorEncodingSettings:
    def __init__(self):

        ## Color encoding pipeline

        # Values are scaled linearly by this factor
        self.brightness = 1.0

        # Then gamma correction x -> x^(1/gamma) is applied
        self.gamma = 1.0

        # Finally, all color values are clamped to range [0,1] and
        # encoded using 8-bit


class Image:

    def __init__( self, npy_filename = None, data = None, settings = None ):
        if npy_filename is None:
            self.data = data
        else:
            self.data = np.load( npy_filename )

        if settings is None: settings = ColorEncodingSettings()
        self.settings = settings

    def save_raw( self, filename, imgdata = None ):
        np.save(filename, self._get( imgdata ))

    def save_png( self, filename, imgdata = None ):
        from PIL import Image as PilImage
        PilImage.fromarray(self.to_24bit(imgdata)).save(filename)

    def _get( self, imgdata ):
        if imgdata is None:
            imgdata = self.data
        if imgdata is None:
            raise ValueError("no image data")
        return imgdata

    def to_24bit( self, imgdata = None ):
        imgdata = np.nan_to_num(np.array(self._get( imgdata ), dtype=np.float64))

        imgdata = np.clip(imgdata*self.settings.brightness, 0, None)
        imgdata = np.power(imgdata, 1.0/self.settings.gamma)
        imgdata = np.clip(imgdata, 0, 1.0)

        return (imgdata*255).astype(np.uint8)
