"""
Complex — Обобщённое комплексное значение над скаляром T

Immutable Pydantic модель, представляющая значение real + imaginary·i.
Параметризуется любым скаляром, удовлетворяющим контракту из
src.core.math.scalars (float, numpy float32/float64, int, Decimal, Fraction).

Поля объявлены в порядке (imaginary, real): равенство, порядок и хеш
определяются структурно именно в этом порядке.

ОПЕРАЦИИ:
    new(im, re)              -> Complex        (мнимая часть первой)
    a + b, a.add(b)          -> покомпонентная сумма
    a * b, a.mul(b)          -> (r1·r2 − i1·i2) + (r1·i2 + i1·r2)·i
    a.dot_product(b)         -> r1·i2 − i1·r2  (скаляр T)
    a.conjugate()            -> (re, −im)
    Complex.zero()           -> (0, 0) в нуле самого T
    a.is_zero()              -> обе компоненты — ноль своего типа

Пример:
    >>> lo = Complex32.new(3.0, 3.0)
    >>> la = Complex32.new(3.0, 3.0)
    >>> str(lo + la)
    '6.0+6.0i'
    >>> str(lo * la)
    '18.0i'
    >>> str(lo.conjugate())
    '3.0-3.0i'
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, TypeAdapter

from src.core.math.scalars import (
    IMAGINARY_UNIT_SUFFIX,
    POSITIVE_IMAGINARY_SEPARATOR,
    Float32,
    Float64,
    Int128,
    is_negative,
    is_zero,
    zero_of,
)

T = TypeVar("T")

# Адаптеры скаляра по параметризованной модели
_SCALAR_ADAPTERS: dict[type, TypeAdapter] = {}


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel, Generic[T]):
    """
    Комплексное значение над скаляром T.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Валидация только типовая (strict): строки не парсятся, NaN/Inf для
    float-скаляров допустимы. Переполнение и NaN целиком определяются
    семантикой самого скаляра.
    """

    imaginary: T = Field(..., description="Мнимая часть")
    real: T = Field(..., description="Действительная часть")

    model_config = {"frozen": True, "strict": True, "arbitrary_types_allowed": True}

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, imaginary: T, real: T) -> "Complex[T]":
        """
        Создание значения из мнимой и действительной части.

        Порядок аргументов: сначала мнимая часть, затем действительная.

        Args:
            imaginary: Мнимая часть
            real: Действительная часть

        Returns:
            Новое значение real + imaginary·i
        """
        return cls(imaginary=imaginary, real=real)

    @classmethod
    def zero(cls) -> "Complex[T]":
        """
        Аддитивная единица (0, 0).

        Ноль берётся у параметра T; для непараметризованной модели — целый 0.
        """
        args = cls.__pydantic_generic_metadata__["args"]
        scalar_zero = zero_of(args[0] if args else None)
        return cls.new(scalar_zero, scalar_zero)

    # -------------------------------------------------------------------------
    # Скалярный контроль
    # -------------------------------------------------------------------------

    @classmethod
    def _scalar(cls, value: Any) -> T:
        """
        Валидация промежуточного скаляра по аннотации параметра T.

        Для Int128 выход за диапазон i128 даёт ValidationError уже на
        промежуточном произведении. Непараметризованная модель не проверяет.
        """
        args = cls.__pydantic_generic_metadata__["args"]
        if not args or isinstance(args[0], TypeVar):
            return value

        adapter = _SCALAR_ADAPTERS.get(cls)
        if adapter is None:
            adapter = TypeAdapter(
                args[0], config={"strict": True, "arbitrary_types_allowed": True}
            )
            _SCALAR_ADAPTERS[cls] = adapter

        return adapter.validate_python(value)

    def _require_same_model(self, other: Any, operation: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{operation} requires operands of the same model, "
                f"got {type(self).__name__} and {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Complex[T]") -> "Complex[T]":
        """
        Покомпонентная сумма.

        Raises:
            TypeError: Если other — другая инстанциация модели
        """
        self._require_same_model(other, "add")
        return self.new(
            self.imaginary + other.imaginary,
            self.real + other.real,
        )

    def mul(self, other: "Complex[T]") -> "Complex[T]":
        """
        Комплексное произведение.

        Формулы:
            real = r1·r2 − i1·i2
            imaginary = r1·i2 + i1·r2

        Raises:
            TypeError: Если other — другая инстанциация модели
        """
        self._require_same_model(other, "mul")
        scalar = self._scalar
        real = scalar(scalar(self.real * other.real) - scalar(self.imaginary * other.imaginary))
        imaginary = scalar(
            scalar(self.real * other.imaginary) + scalar(self.imaginary * other.real)
        )
        return self.new(imaginary, real)

    def dot_product(self, other: "Complex[T]") -> T:
        """
        "Скалярное произведение" двух значений: r1·i2 − i1·r2.

        Это антисимметричная билинейная форма, а не эрмитово произведение
        r1·r2 + i1·i2. Формула сохраняется буквально.

        Args:
            other: Второе значение той же инстанциации

        Returns:
            Скаляр типа T (для Int128 — в пределах i128)

        Raises:
            TypeError: Если other — другая инстанциация модели
            ValidationError: Если скаляр вышел за пределы своего типа
        """
        self._require_same_model(other, "dot_product")
        scalar = self._scalar
        return scalar(scalar(self.real * other.imaginary) - scalar(self.imaginary * other.real))

    def conjugate(self) -> "Complex[T]":
        """Сопряжённое значение: (re, −im)"""
        return self.new(-self.imaginary, self.real)

    def is_zero(self) -> bool:
        """Обе компоненты являются нулём по предикату своего скаляра"""
        return is_zero(self.real) and is_zero(self.imaginary)

    def __add__(self, other: Any) -> "Complex[T]":
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: Any) -> "Complex[T]":
        if type(other) is not type(self):
            return NotImplemented
        return self.mul(other)

    # -------------------------------------------------------------------------
    # Структурное равенство, порядок и хеш по (imaginary, real)
    # -------------------------------------------------------------------------

    def _precedes(self, other: "Complex[Any]", strict: bool) -> bool:
        # Лексикографически: imaginary, затем real; NaN ни с чем не упорядочен
        if self.imaginary == other.imaginary:
            return bool(self.real < other.real if strict else self.real <= other.real)
        return bool(self.imaginary < other.imaginary)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return bool(self.imaginary == other.imaginary and self.real == other.real)

    def __hash__(self) -> int:
        return hash((self.imaginary, self.real))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._precedes(other, strict=True)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._precedes(other, strict=False)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return other._precedes(self, strict=True)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return other._precedes(self, strict=False)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        Текстовое представление.

        Правила (в порядке приоритета):
        1. re == 0, im != 0  → "<im>i"
        2. re != 0, im == 0  → "<re>"
        3. im < 0            → "<re><im>i"  (знак даёт сама мнимая часть)
        4. иначе             → "<re>+<im>i" (в том числе "0+0i")
        """
        real_zero = is_zero(self.real)
        imaginary_zero = is_zero(self.imaginary)

        if real_zero and not imaginary_zero:
            return f"{self.imaginary!s}{IMAGINARY_UNIT_SUFFIX}"

        if not real_zero and imaginary_zero:
            return f"{self.real!s}"

        if is_negative(self.imaginary):
            return f"{self.real!s}{self.imaginary!s}{IMAGINARY_UNIT_SUFFIX}"

        return (
            f"{self.real!s}{POSITIVE_IMAGINARY_SEPARATOR}"
            f"{self.imaginary!s}{IMAGINARY_UNIT_SUFFIX}"
        )


# =============================================================================
# ФИКСИРОВАННЫЕ ИНСТАНЦИАЦИИ
# =============================================================================

Complex32 = Complex[Float32]
Complex64 = Complex[Float64]
ComplexI128 = Complex[Int128]
