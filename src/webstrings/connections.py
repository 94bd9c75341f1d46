from importlib import resources

class MimeTypeDataSource:
    @property
    def csv_path(self):
        """ Extension to mimetype table, one row per extension """
        return resources.files('webstrings.data').joinpath('mimetypes.csv')
