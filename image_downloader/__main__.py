from image_downloader.app import run

run()
