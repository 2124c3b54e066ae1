from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, SubmitField
from wtforms.validators import DataRequired, Length


class FormularioDireccion(FlaskForm):
    nombre = StringField("Nombre", validators=[DataRequired(), Length(max=100)])
    direccion = StringField("Dirección", validators=[DataRequired(), Length(min=3, max=150)])
    ciudad = StringField("Ciudad", validators=[DataRequired(), Length(max=100)])
    codigo_postal = StringField("Código postal", validators=[DataRequired(), Length(max=12)])
    # Las opciones se rellenan en la vista con los países disponibles; un
    # valor fuera de la lista no supera la validación de SelectField.
    pais_id = SelectField("País", coerce=int, validators=[DataRequired()])
    guardar = SubmitField("Continuar")
